"""css_colour.core — Foundation layer.

Contains the colour value types, hex parser, validation helpers, config
loading and the report builder. This module has NO dependencies on
css_colour.swatch or the CLI. Only stdlib is allowed here.
"""
