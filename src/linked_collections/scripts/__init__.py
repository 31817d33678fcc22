"""Command line scripts"""
