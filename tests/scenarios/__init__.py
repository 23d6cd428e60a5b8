"""Conformance test scenarios for the cookie middleware.

This package contains end-to-end scenario tests that verify the store and
the ASGI middleware behave correctly for each documented scenario, from the
``Cookie`` request header to the ``Set-Cookie`` response headers.
"""
