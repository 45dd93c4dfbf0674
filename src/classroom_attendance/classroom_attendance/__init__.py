"""Classroom Attendance package.

A single-page attendance tracker organised by feature modules (classes,
students, attendance, reports) with a thin Flask controller layer over
service/repository layers backed by one in-memory store.
"""
