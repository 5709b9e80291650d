"""Core de avatar-link: dominio, configuración y servicios (sin CLI)."""
