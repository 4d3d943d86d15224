"""
Locating schema.rb and Rails model files.
"""
