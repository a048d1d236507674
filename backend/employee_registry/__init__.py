"""
Реестр сотрудников: бизнес-логика учётных записей.
"""
