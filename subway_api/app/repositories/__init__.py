"""
Persistence layer.

Repositories own every SQL statement in the application.  Each one is
constructed with a ``Database`` handle and returns plain ``sqlite3.Row``
objects; turning rows into API schemas is the job of the services.
"""
