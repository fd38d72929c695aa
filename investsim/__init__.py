"""
investsim - Property Investment Return & Break-Even Simulator

Sensitivity-analysis engine for a single property investment.

Modules:
    - core: Exceptions, logging, settings and loan primitives
    - domain: Pydantic models and the pure return / break-even engine
    - application: Sensitivity sweeps, matrices, scenarios and the analysis facade
"""

__version__ = "1.4.0"
