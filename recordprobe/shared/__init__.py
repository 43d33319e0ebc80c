"""Shared configuration, enums, exceptions, schemas and utilities"""
