#!/usr/bin/env python

from setuptools import setup


setup(name="taylorpoly",
      version="2026.1",
      description="Arithmetic on truncated power series in Python",
      long_description="""
      Taylor polynomials in one variable over generic coefficient types,
      with elementary functions computed by recurrences.
      """,
      classifiers=[
          "Development Status :: 3 - Alpha",
          "Intended Audience :: Developers",
          "Intended Audience :: Science/Research",
          "License :: OSI Approved :: MIT License",
          "Natural Language :: English",
          "Programming Language :: Python",
          "Programming Language :: Python :: 3",
          "Topic :: Scientific/Engineering",
          "Topic :: Scientific/Engineering :: Mathematics",
          "Topic :: Software Development :: Libraries",
          "Topic :: Utilities",
          ],

      author="The taylorpoly developers",
      license="MIT",
      packages=["taylorpoly"],
      python_requires=">=3.10",

      install_requires=[
          "numpy",
          "pytools>=2024.1",
          "sympy>=1.12",
          "mpmath>=1.3",
          ],

      extras_require={
          "symengine": ["symengine"],
          "test": ["pytest>=7"],
          },
      )
