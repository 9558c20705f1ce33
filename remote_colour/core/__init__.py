"""remote_colour.core — Foundation layer.

Contains the hash, URL normalizer, palette and contrast maths, the
derivation pipeline, config, git lookup, settings store and report builder.
This module has NO dependencies on remote_colour.commands or remote_colour.registry.
Only stdlib is allowed here; PIL stays in the commands that render images.
"""
