"""
Mock integration clients.

These clients return fake (but realistic) responses without calling any external API.
They are used when:
- The inventory API is not reachable (offline development, demos)
- We want to test consumers end-to-end without external dependencies

Important:
- Mock clients must follow the SAME interface as real HTTP clients (ProductsClient).
- Mock clients must raise the same error types (see policy/response_wrappers.py).
"""
