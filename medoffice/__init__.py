"""MedOffice - calendar, scheduling and export backend for a medical office."""
