"""
IMS Frontend - page views and backend client for the Inventory Management System
"""
__version__ = "1.0.0"
