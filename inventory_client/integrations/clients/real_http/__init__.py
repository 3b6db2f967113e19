"""
Real HTTP integration clients.

These clients communicate with the inventory REST API via HTTP.

Important:
- Must implement the same interface as the mock clients (ProductsClient)
- Must return data shaped according to inventory_client/integrations/contracts/*
"""
