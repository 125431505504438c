"""Command-line interface for running practice queries"""
