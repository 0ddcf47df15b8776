"""
E-commerce domain: orders, accounts and review workflows.
"""
