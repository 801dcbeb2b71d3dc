"""
SkillUp - AI-generated learning roadmaps with saved progress.
"""
