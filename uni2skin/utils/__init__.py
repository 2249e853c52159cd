"""Shared utilities: constants, exceptions, logging, settings, backups"""
