"""
Assemblyman REST API.

Requires djangorestframework. Include assemblyman.api.urls in your project.
"""
