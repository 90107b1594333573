"""
Storefront - CRUD backend for customers, product categories, shopping carts
and product orders
"""
__version__ = "1.0.0"
