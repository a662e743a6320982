"""
tokengraph core: IR types, color codec, palettes, naming, errors and configuration.
"""
