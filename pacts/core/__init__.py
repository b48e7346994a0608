"""Core data models, configuration and errors"""
