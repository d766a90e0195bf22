"""
Service layer abstraction.

Services encapsulate the business flow of a domain and depend only on
the repository contract, so the store behind them can be swapped
without touching the API handlers.
"""
