"""
LinqQuiz - sequence, family and letter statistics.

Entry points live in linqquiz.components.quiz.
"""
