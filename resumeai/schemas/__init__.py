"""API schemas"""
