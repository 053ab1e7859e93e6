"""
atomsim - Toy orbital visualization of electrons around a nucleus.

Electrons ride fixed circular shells with constant angular velocity.
Time advances in discrete steps and each snapshot prints the Cartesian
position of every electron. There are no forces and no interactions:
only angular kinematics.

Main features:
- Seeded, reproducible electron placement
- Bohr-style shell filling for light elements
- Observer-based reporting (console snapshots, trajectories)
- YAML configuration for complete simulation setup
"""

__version__ = "0.1.0"
__author__ = "atomsim Team"
