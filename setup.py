from __future__ import annotations

from setuptools import setup


# Metadata lives in setup.cfg.
setup()
