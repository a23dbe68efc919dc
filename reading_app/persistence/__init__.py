"""
Plan persistence.

Stores plans as JSON documents in a plans directory and lists them back.
"""
from .plan_store import PlanLoadResult, PlanStore, plan_from_dict, plan_to_dict

__all__ = ["PlanLoadResult", "PlanStore", "plan_from_dict", "plan_to_dict"]
