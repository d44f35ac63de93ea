"""
Services for lecture-notes-i18n: format migration, language resolution and study-action flow
"""
