"""
Aim & Range alignment for a holonomic drivetrain
"""
