"""Domain services.

``global_data`` builds the blog's site-wide display strings from environment input.
"""
