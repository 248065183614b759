"""
Service layer abstraction.

Each service encapsulates the business rules for one resource.  A
service is constructed with the ``Database`` handle and builds the
repositories it needs, so API handlers never touch SQL or rows.
"""
