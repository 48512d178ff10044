"""Utility helpers used across layers"""
