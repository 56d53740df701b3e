"""
API package for PayRouter.
HTTP surface over the payment dispatcher.
"""
