"""
Controllers Package

Contains the Flask blueprints exposing the game service over HTTP.
"""
