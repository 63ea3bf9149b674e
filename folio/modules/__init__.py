"""
Folio Modules
=============

One package per content type, each with its own blueprint:
auth, projects, blog, skills, experience, education, personal_info,
settings, contact, dashboard, ops. `email` is a service, not a blueprint.
"""
