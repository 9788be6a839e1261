# Force SQLModel table registration at test discovery time
# This ensures all models are registered before any test database creation
from courtside.models.player import Player  # noqa: F401
from courtside.models.signup import Signup, SignupDay  # noqa: F401
from courtside.models.tournament import Tournament  # noqa: F401
