"""Aggregation and key helpers shared by operators"""
