"""
HTTP layer.

``router`` holds the route table, ``endpoints`` one module per
resource, ``deps`` the dependency providers that hand services to the
handlers and ``errors`` the translation of domain errors to status
codes.
"""
