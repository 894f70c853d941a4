"""Weather providers"""
