"""
Core: алфавиты, арифметика цифр, исключения.

Состояния уровня процесса нет. Stepping-методы Digits импортируют
base_digits.stepping лениво.
"""
