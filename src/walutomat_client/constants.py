"""
Constants for the Walutomat client.
"""

# API Configuration
DEFAULT_BASE_URL = "https://api.walutomat.pl"

# Authentication headers
API_KEY_HEADER = "X-API-KEY"
API_NONCE_HEADER = "X-API-NONCE"
API_SIGNATURE_HEADER = "X-API-SIGNATURE"

# Environment variables
ENV_API_KEY = "WT_KEY"
ENV_API_SECRET = "WT_SECRET"
ENV_BASE_URL = "WT_BASE_URL"

# v1 endpoints
V1_ACCOUNT_ID = "/api/v1/account/id"
V1_ACCOUNT_BALANCES = "/api/v1/account/balances"
V1_ORDERBOOK = "/api/v1/public/market/orderbook/{pair}"
V1_MARKET_ORDERS = "/api/v1/market/orders"
V1_MARKET_ORDER = "/api/v1/market/orders/{order_id}"
V1_MARKET_ORDER_CLOSE = "/api/v1/market/orders/close/{order_id}"

# v2 endpoints
V2_ACCOUNT_BALANCES = "/api/v2.0.0/account/balances"
V2_DIRECT_FX_RATES = "/api/v2.0.0/direct_fx/rates"
V2_DIRECT_FX_EXCHANGES = "/api/v2.0.0/direct_fx/exchanges"
V2_BEST_OFFERS = "/api/v2.0.0/market_fx/best_offers"
V2_MARKET_FX_ORDERS = "/api/v2.0.0/market_fx/orders"
V2_MARKET_FX_ORDER_CLOSE = "/api/v2.0.0/market_fx/orders/close"
