"""
Domain layer package.

Contains pure business logic: entities, validation rules, email
composition, and port interfaces. No framework imports, no IO.
"""
