"""Vacation System package.

Organized by feature modules (users, requests) with a thin Flask controller
layer over service/repository layers.
"""
