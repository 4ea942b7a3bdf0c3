# contact/context_processors.py
from django.conf import settings

def page_meta(request):
    return {
        "PAGE_TITLE": getattr(settings, "CONTACT_PAGE_TITLE", "Frontend Mentor | Contact form"),
        "PAGE_DESCRIPTION": getattr(settings, "CONTACT_PAGE_DESCRIPTION", ""),
    }
