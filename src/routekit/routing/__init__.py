"""Routing — ordered route table, path matcher, and match resolver.

Routes are registered during setup and frozen before requests are
served. Matching walks the table in stored order; the first route
whose method and pattern match wins.
"""
