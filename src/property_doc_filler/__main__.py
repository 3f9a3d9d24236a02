"""
Entry point for running the package as a module.
This allows: python -m property_doc_filler
"""
import sys

from .cli import main

sys.exit(main())
