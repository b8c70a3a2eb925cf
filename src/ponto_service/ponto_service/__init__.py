"""Ponto (attendance) service package.

Feature modules (employees, pontos) sit on a thin Flask controller layer and
service/repository layers backed by a Neo4j graph store.
"""
