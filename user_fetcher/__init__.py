"""User Fetcher Package: cached, retrying client for the ReqRes users API.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""
