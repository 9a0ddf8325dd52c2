"""
Submissions module - the intake and triage engine shared by every form.

Each form package supplies a FormDescriptor plus its model and schemas;
this package validates, de-duplicates, references, stores, lists and
transitions records for all of them.
"""

from foundation_api.modules.submissions.form import DuplicateRule, FormDescriptor, StatusNotice

__all__ = ["DuplicateRule", "FormDescriptor", "StatusNotice"]
