# Middleware package init
"""
Blog API Backend — Middleware Package
======================================

Middleware Chain (order matters):
    Request → [Request ID] → [Logging] → Route Handler

    Request ID runs first so the access log line carries the id.
    Responses travel back through the chain in reverse order.
"""
