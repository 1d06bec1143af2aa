"""
Service layer.

Each service encapsulates the business rules for one resource and
receives the application's ``Database`` handle on construction, so API
handlers never issue SQL themselves.
"""
