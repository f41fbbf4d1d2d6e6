"""Orchestrators for the nutrition calculator."""

from .energy_plan_orchestrator import EnergyPlan, EnergyPlanOrchestrator

__all__ = ["EnergyPlan", "EnergyPlanOrchestrator"]
