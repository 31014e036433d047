"""
Service layer abstraction.

Services encapsulate the business logic of a domain and operate on a
store handed to them by the API layer, so handlers never touch the
storage directly.
"""
