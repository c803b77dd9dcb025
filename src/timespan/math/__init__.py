"""
Core math modules для timespan

Разбиение длительности на поля, сравнение и целочисленные примитивы.
"""
