"""Adapters: filesystem access and filename sanitation."""
