"""Kernel – error hierarchy shared by every adapter."""
