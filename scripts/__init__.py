"""
Deployment Scripts
"""
