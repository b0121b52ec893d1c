"""
Kudos
=====

Backend for an employee-recognition application: teams, comments and
reactions on kudos cards, admin user review and kudos analytics.
"""
