"""Каноническое текстовое представление длительности."""
