"""
Contracts (data models).

This folder defines the shapes exchanged with the inventory API:
- the Product record and its wire (de)serialization
- the ProductsClient interface shared by real and mock clients

Both mock and real HTTP clients should use these contracts.
"""
