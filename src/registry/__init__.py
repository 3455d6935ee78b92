"""Clients for the Spring Boot and starter metadata servers."""
