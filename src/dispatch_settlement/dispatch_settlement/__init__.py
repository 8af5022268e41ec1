"""Instructor dispatch settlement package.

This package is organized by feature modules (instructors, institutions,
activities, routing, settlement) with a thin Flask controller layer and
service/repository layers around a pure settlement engine.
"""
