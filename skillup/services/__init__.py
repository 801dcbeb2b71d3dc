"""SkillUp services."""
