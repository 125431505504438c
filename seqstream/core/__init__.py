"""Core sequence API, record types and exceptions"""
