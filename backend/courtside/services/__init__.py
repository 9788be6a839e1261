"""
Services Layer

Pure tournament logic that:
- Accepts brackets, match ids and labels
- Returns new Bracket values (inputs are never mutated)
- Does NOT depend on HTTP request/response objects or the database
"""
