"""Provision the site's content tables with the company's published copy.

Each table is seeded only when empty, so the routine is safe to re-run.

    python -m srimitha.db.seed
"""

from __future__ import annotations

import calendar
from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from sqlmodel import Session, SQLModel

from srimitha.core.config import settings
from srimitha.core.logging import configure_logging, get_logger
from srimitha.core.time import utcnow
from srimitha.db import crud
from srimitha.db.session import engine, init_db
from srimitha.models import Collaboration, Event, Project, Service, Setting, TeamMember, Testimonial

logger = get_logger(__name__)

COMPANY = "Srimitha Energy Solutions"


def _add_months(value: datetime, months: int) -> datetime:
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def services_data(_now: datetime) -> list[dict[str, Any]]:
    return [
        {
            "title": "Power Distribution Systems",
            "description": (
                "Engineering & implementation of reliable power distribution systems for commercial, "
                "industrial, and residential applications, including substation design, high and "
                "medium voltage networks, and power quality solutions."
            ),
            "icon": "bolt",
            "slug": "power-distribution-systems",
        },
        {
            "title": "Renewable Energy Solutions",
            "description": (
                "Design and integration of solar, wind, hydroelectric, and hybrid systems, from resource "
                "assessment to implementation and grid connection."
            ),
            "icon": "sun",
            "slug": "renewable-energy-solutions",
        },
        {
            "title": "Energy Management Systems",
            "description": (
                "Energy management with real-time monitoring, automated controls, and analytics to cut "
                "consumption and operating costs."
            ),
            "icon": "gauge",
            "slug": "energy-management-systems",
        },
        {
            "title": "Electric Vehicle Infrastructure",
            "description": (
                "Planning and deployment of EV charging for public facilities, commercial properties, and "
                "residential complexes, from single chargers to networked hubs."
            ),
            "icon": "car-battery",
            "slug": "ev-infrastructure",
        },
        {
            "title": "Power Electronics Design",
            "description": (
                "Converters, inverters, and control systems for specialised applications, in both analog "
                "and digital power electronics."
            ),
            "icon": "microchip",
            "slug": "power-electronics-design",
        },
        {
            "title": "Energy Audits & Optimization",
            "description": (
                "Energy audits with thermal imaging, load analysis, and power quality assessment, ending in "
                "ROI-focused recommendations."
            ),
            "icon": "magnifying-glass-chart",
            "slug": "energy-audits-optimization",
        },
    ]


def projects_data(_now: datetime) -> list[dict[str, Any]]:
    return [
        {
            "title": "Smart Grid Implementation for Municipal Utility",
            "description": (
                "Smart grid for a municipal utility serving 50,000 residents: advanced metering, "
                "distribution automation, and a central management system."
            ),
            "image": "https://images.unsplash.com/photo-1473341304170-971dccb5ac1e",
            "category": "Smart Grids",
            "client": "Westlake Municipal Utility",
            "completion_date": datetime(2023, 8, 15),
            "slug": "smart-grid-municipal-utility",
        },
        {
            "title": "Solar Microgrid for Rural Healthcare Facility",
            "description": (
                "100kW solar microgrid with battery storage giving a rural clinic 24/7 power and cutting "
                "operating costs by 60%."
            ),
            "image": "https://images.unsplash.com/photo-1509391366360-2e959784a276",
            "category": "Renewable Energy",
            "client": "Regional Health Partners",
            "completion_date": datetime(2023, 5, 10),
            "slug": "solar-microgrid-healthcare",
        },
        {
            "title": "Commercial EV Fleet Charging Infrastructure",
            "description": (
                "Smart charging for a fleet of 50 electric delivery vans, scheduling charge windows around "
                "peak demand."
            ),
            "image": "https://images.unsplash.com/photo-1593941707882-a5bba13938c7",
            "category": "EV Infrastructure",
            "client": "GreenDelivery Logistics",
            "completion_date": datetime(2023, 11, 30),
            "slug": "ev-fleet-charging",
        },
        {
            "title": "Industrial Energy Management System",
            "description": (
                "Plant-wide energy management for a manufacturer with monitoring and predictive "
                "maintenance, reducing consumption by 25%."
            ),
            "image": "https://images.unsplash.com/photo-1581094794329-c8112a89af12",
            "category": "Energy Management",
            "client": "PrecisionMfg Industries",
            "completion_date": datetime(2023, 3, 22),
            "slug": "industrial-energy-management",
        },
        {
            "title": "Hybrid Power System for Island Community",
            "description": (
                "Solar, wind, and diesel hybrid with storage for an island of 2,000 residents, cutting "
                "fossil fuel use by 70%."
            ),
            "image": "https://images.unsplash.com/photo-1532601224476-15c79f2f7a51",
            "category": "Renewable Energy",
            "client": "Isla Verde Township",
            "completion_date": datetime(2022, 9, 15),
            "slug": "island-hybrid-power",
        },
        {
            "title": "Power Quality Improvement for Data Center",
            "description": (
                "Harmonic filtering, surge suppression, and UPS for a 10MW data center, eliminating "
                "power-related downtime."
            ),
            "image": "https://images.unsplash.com/photo-1558494949-ef010cbdcc31",
            "category": "Power Quality",
            "client": "CloudSphere Data Services",
            "completion_date": datetime(2023, 1, 12),
            "slug": "data-center-power-quality",
        },
    ]


def team_data(_now: datetime) -> list[dict[str, Any]]:
    return [
        {
            "name": "Dr. Priya Sharma",
            "position": "Founder & CEO",
            "bio": f"Twenty years in electrical engineering and renewable systems; founded {COMPANY}.",
            "image": "https://images.unsplash.com/photo-1573496359142-b8d87734a5a2",
            "social_links": {
                "linkedin": "https://linkedin.com/in/priyasharma",
                "twitter": "https://twitter.com/drsharma",
            },
            "display_order": 1,
        },
        {
            "name": "Rajiv Mehta",
            "position": "Chief Technology Officer",
            "bio": "Leads power electronics and control systems work, with 15 years of industry experience.",
            "image": "https://images.unsplash.com/photo-1560250097-0b93528c311a",
            "social_links": {"linkedin": "https://linkedin.com/in/rajivmehta"},
            "display_order": 2,
        },
        {
            "name": "Ananya Patel",
            "position": "Renewable Energy Director",
            "bio": "Specialises in solar and wind systems and their grid integration.",
            "image": "https://images.unsplash.com/photo-1580489944761-15a19d654956",
            "social_links": {
                "linkedin": "https://linkedin.com/in/ananyapatel",
                "twitter": "https://twitter.com/ananyaenergy",
            },
            "display_order": 3,
        },
        {
            "name": "Samuel Johnson",
            "position": "Smart Grid Engineer",
            "bio": "Works on smart grid technologies and advanced metering for utilities.",
            "image": "https://images.unsplash.com/photo-1519085360753-af0119f7cbe7",
            "social_links": {"linkedin": "https://linkedin.com/in/samueljohnson"},
            "display_order": 4,
        },
    ]


def testimonials_data(_now: datetime) -> list[dict[str, Any]]:
    return [
        {
            "name": "Michael Chen",
            "position": "Operations Director",
            "company": "GreenTech Manufacturing",
            "quote": "Their energy management system cut our energy costs by 30%.",
            "image": "https://images.unsplash.com/photo-1472099645785-5658abf4ff4e",
            "rating": 5,
        },
        {
            "name": "Sarah Rodriguez",
            "position": "Sustainability Manager",
            "company": "Metro Hospital Network",
            "quote": "The solar microgrid keeps our rural clinics powered through frequent outages.",
            "image": "https://images.unsplash.com/photo-1554727242-741c14fa561c",
            "rating": 5,
        },
        {
            "name": "James Wilson",
            "position": "Chief Information Officer",
            "company": "DataStream Solutions",
            "quote": "Zero downtime since they fixed the power quality in our data center.",
            "image": "https://images.unsplash.com/photo-1507003211169-0a1dd7228f2d",
            "rating": 5,
        },
    ]


def events_data(now: datetime) -> list[dict[str, Any]]:
    next_month = _add_months(now, 1)
    two_months = _add_months(now, 2)
    last_month = _add_months(now, -1)
    return [
        {
            "title": "Renewable Energy Integration Workshop",
            "description": (
                "Two-day workshop on integrating renewables into existing power systems: grid "
                "stability, storage, and smart controls."
            ),
            "start_date": next_month,
            "end_date": next_month + timedelta(days=1),
            "location": f"{COMPANY} Training Center, Bangalore",
            "image": "https://images.unsplash.com/photo-1540575467063-178a50c2df87",
            "capacity": 50,
            "registration_url": "https://forms.example.com/renewableworkshop",
        },
        {
            "title": "EV Infrastructure Planning Forum",
            "description": "Planning EV charging infrastructure: technology, regulation, and funding.",
            "start_date": two_months,
            "end_date": two_months,
            "location": "Grand Hyatt, Mumbai",
            "image": "https://images.unsplash.com/photo-1593941707882-a5bba13938c7",
            "capacity": 100,
            "registration_url": "https://forms.example.com/evforum",
        },
        {
            "title": "Energy Efficiency in Industrial Systems Seminar",
            "description": "Motor drives, compressed air, and process heating efficiency for industrial plants.",
            "start_date": last_month,
            "end_date": last_month,
            "location": "Virtual Webinar",
            "image": "https://images.unsplash.com/photo-1581244277943-fe4d9aa28207",
            "capacity": 200,
            "registration_url": None,
        },
    ]


def collaborations_data(_now: datetime) -> list[dict[str, Any]]:
    return [
        {
            "name": "Indian Institute of Technology, Bombay",
            "logo": "https://example.com/iitb-logo.svg",
            "website": "https://www.iitb.ac.in",
            "description": "Research partnership on power electronics and energy storage.",
            "display_order": 1,
        },
        {
            "name": "Tata Power",
            "logo": "https://example.com/tatapower-logo.svg",
            "website": "https://www.tatapower.com",
            "description": "Smart grid and distributed energy resource management pilots.",
            "display_order": 2,
        },
        {
            "name": "National Renewable Energy Laboratory",
            "logo": "https://example.com/nrel-logo.svg",
            "website": "https://www.nrel.gov",
            "description": "Research on advanced solar systems and grid integration.",
            "display_order": 3,
        },
        {
            "name": "EV Manufacturers Association of India",
            "logo": "https://example.com/evmai-logo.svg",
            "website": "https://www.evmai.org",
            "description": "Charging standards and infrastructure policy work.",
            "display_order": 4,
        },
    ]


def settings_data(_now: datetime) -> list[dict[str, Any]]:
    copy = {
        "company_name": COMPANY,
        "company_email": "info@srimitha-energy.com",
        "company_phone": "+91 80 1234 5678",
        "company_address": "36 Energy Park Road, Electronic City Phase 1, Bangalore, Karnataka 560100, India",
        "social_linkedin": "https://linkedin.com/company/srimitha-energy",
        "social_twitter": "https://twitter.com/srimitha_energy",
        "social_facebook": "https://facebook.com/srimithaenergy",
        "about_company": (
            f"{COMPANY} is an electrical engineering firm specialising in renewable energy systems, "
            "power distribution, and energy efficiency."
        ),
        "company_mission": (
            "To accelerate the transition to sustainable energy through reliable, efficient, and "
            "environmentally responsible engineering."
        ),
        "company_vision": "A world powered by clean, accessible, and reliable energy.",
    }
    return [{"key": key, "value": value} for key, value in copy.items()]


SEED_PLAN: list[tuple[str, type[SQLModel], Callable[[datetime], list[dict[str, Any]]]]] = [
    ("services", Service, services_data),
    ("projects", Project, projects_data),
    ("team", TeamMember, team_data),
    ("testimonials", Testimonial, testimonials_data),
    ("events", Event, events_data),
    ("collaborations", Collaboration, collaborations_data),
    ("settings", Setting, settings_data),
]


def seed_database(session: Session, now: datetime | None = None) -> dict[str, int]:
    """Seed every empty content table; returns rows inserted per table."""
    now = now or utcnow()
    inserted: dict[str, int] = {}
    for name, model, build in SEED_PLAN:
        if crud.count(session, model) > 0:
            logger.info("seed.%s.skipped reason=not_empty", name)
            inserted[name] = 0
            continue
        rows = build(now)
        session.add_all(model(**row) for row in rows)
        session.commit()
        logger.info("seed.%s.inserted count=%d", name, len(rows))
        inserted[name] = len(rows)
    return inserted


def main() -> None:
    configure_logging(settings.log_level)
    if settings.db_create_all:
        init_db()
    with Session(engine) as session:
        seed_database(session)
    logger.info("seed.completed")


if __name__ == "__main__":
    main()
