"""
services/ - Business Logic Layer
=================================
Sits between handlers and repositories. Handlers never touch SQL directly.
"""
