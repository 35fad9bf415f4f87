from srimitha.models.content import Collaboration, Project, Service, TeamMember, Testimonial
from srimitha.models.events import Event
from srimitha.models.settings import Setting
from srimitha.models.submissions import ContactMessage, InternshipApplication, NewsletterSubscriber

__all__ = [
    "Service",
    "Project",
    "TeamMember",
    "Testimonial",
    "Collaboration",
    "Event",
    "Setting",
    "ContactMessage",
    "NewsletterSubscriber",
    "InternshipApplication",
]
