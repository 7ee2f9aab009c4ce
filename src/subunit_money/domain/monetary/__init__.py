"""Monetary domain package.

This package contains the `Money` value type, which stores amounts as whole
currency sub-units (e.g. cents), together with its error types and the
remainder-fair split used to share an amount between several parties.
"""
