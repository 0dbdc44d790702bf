"""Adapters – sinks and front-end bridges built on :mod:`logext.core`."""
