"""
Time tracking and weekly timesheet approval service.
"""
