#!/usr/bin/env python3
# =============================================================================
# scripts/seed.py - Demo Content Loader
# =============================================================================
# Fills `projects` and `events` with demo content when they are empty.
# Polls need no seeding: they are the four most upvoted projects.
# Counters are left at 0; they only ever count real vote / participation rows.
#
# Usage:
#   python scripts/seed.py
#
# Prerequisites:
#   - Schema applied (supabase/migrations/0001_civic_schema.sql)
#   - SUPABASE_URL / SUPABASE_SERVICE_KEY set (.env file)
# =============================================================================

import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from core.services.event_service import EVENTS_TABLE
from core.services.project_service import PROJECTS_TABLE
from lib.supabase_client import SupabaseClient

logger = logging.getLogger("seed")

PROJECTS = [
    {
        "title_bn": "পদ্মা সেতু রেল সংযোগ প্রকল্প",
        "title_en": "Padma Bridge Rail Link Project",
        "description_bn": "পদ্মা সেতুর মাধ্যমে ঢাকা থেকে যশোর পর্যন্ত রেললাইন নির্মাণ।",
        "description_en": "Construction of a rail line from Dhaka to Jessore via the Padma Bridge.",
        "category": "Infrastructure",
        "budget": "৳ ৩৯,২৪৬ কোটি",
        "status": "Implementation",
        "image_url": "https://placehold.co/800x400/000000/FFFFFF?text=Padma+Rail+Link",
    },
    {
        "title_bn": "ঢাকা মেট্রোরেল প্রকল্প",
        "title_en": "Dhaka Metro Rail Project",
        "description_bn": "ঢাকার যানজট নিরসনে নগর জুড়ে দ্রুতগতির গণপরিবহন ব্যবস্থা স্থাপন।",
        "description_en": "Establishing a rapid mass transit system across Dhaka to alleviate traffic congestion.",
        "category": "Infrastructure",
        "budget": "৳ ৩৩,৪৭২ কোটি",
        "status": "Active",
        "image_url": "https://placehold.co/800x400/333333/FFFFFF?text=Dhaka+Metro",
    },
    {
        "title_bn": "রূপপুর পারমাণবিক বিদ্যুৎ কেন্দ্র",
        "title_en": "Rooppur Nuclear Power Plant",
        "description_bn": "দেশের প্রথম পারমাণবিক বিদ্যুৎ কেন্দ্র স্থাপন করে দীর্ঘমেয়াদী বিদ্যুৎ চাহিদা পূরণ।",
        "description_en": "Meeting long-term electricity demand by establishing the country's first nuclear power plant.",
        "category": "Energy",
        "budget": "৳ ১,১৩,০৯৫ কোটি",
        "status": "Implementation",
        "image_url": "https://placehold.co/800x400/777777/FFFFFF?text=Rooppur+NPP",
    },
    {
        "title_bn": "ঢাকা এলিভেটেড এক্সপ্রেসওয়ে",
        "title_en": "Dhaka Elevated Expressway",
        "description_bn": "বিমানবন্দর থেকে কুতুবখালী পর্যন্ত বিস্তৃত ঢাকার প্রথম এলিভেটেড এক্সপ্রেসওয়ে।",
        "description_en": "Dhaka's first elevated expressway, extending from the airport to Kutubkhali.",
        "category": "Infrastructure",
        "budget": "৳ ৮,৯৪০ কোটি",
        "status": "Partially Active",
        "image_url": "https://placehold.co/800x400/4d5e6f/FFFFFF?text=Elevated+Expressway",
    },
    {
        "title_bn": "মাতারবাড়ী গভীর সমুদ্র বন্দর",
        "title_en": "Matarbari Deep Sea Port",
        "description_bn": "কক্সবাজারের মাতারবাড়ীতে দেশের প্রথম গভীর সমুদ্র বন্দর নির্মাণ।",
        "description_en": "Construction of the country's first deep sea port at Matarbari, Cox's Bazar.",
        "category": "Infrastructure",
        "budget": "৳ ১৭,৭৭৭ কোটি",
        "status": "Implementation",
        "image_url": "https://placehold.co/800x400/2a3b4c/FFFFFF?text=Matarbari+Port",
    },
]

# Dates are ISO so the "event has ended" check can compare them as text
EVENTS = [
    {
        "title_bn": "অমর একুশে বইমেলা",
        "title_en": "Ekushey Book Fair",
        "description_bn": "ভাষা আন্দোলনের শহীদদের স্মরণে প্রতি বছর ফেব্রুয়ারি মাসে বাংলা একাডেমি প্রাঙ্গণে অনুষ্ঠিত বইমেলা।",
        "description_en": "The book fair held every February on the Bangla Academy premises in memory of the martyrs of the Language Movement.",
        "category": "Culture",
        "date": "2025-02-01",
        "location": "বাংলা একাডেমি, ঢাকা",
        "image_url": "https://placehold.co/800x400/999999/FFFFFF?text=Ekushey+Book+Fair",
        "volunteers_needed": 150,
    },
    {
        "title_bn": "জাতীয় বৃক্ষরোপণ অভিযান",
        "title_en": "National Tree Plantation Campaign",
        "description_bn": "পরিবেশ রক্ষায় দেশব্যাপী বৃক্ষরোপণ কর্মসূচি এবং জনসচেতনতা সৃষ্টি।",
        "description_en": "A nationwide tree plantation program and public awareness campaign to protect the environment.",
        "category": "Environment",
        "date": "2025-07-05",
        "location": "সারাদেশ",
        "image_url": "https://placehold.co/800x400/DDDDDD/FFFFFF?text=Tree+Plantation",
        "volunteers_needed": 500,
    },
    {
        "title_bn": "বিজয় দিবস উদযাপন",
        "title_en": "Victory Day Celebration",
        "description_bn": "জাতীয় প্যারেড স্কয়ারে সামরিক কুচকাওয়াজ এবং দেশব্যাপী বিভিন্ন সাংস্কৃতিক অনুষ্ঠানের মাধ্যমে বিজয় দিবস পালন।",
        "description_en": "Observing Victory Day with a military parade at the National Parade Square and various cultural events across the country.",
        "category": "National",
        "date": "2026-12-16",
        "location": "জাতীয় প্যারেড স্কয়ার, ঢাকা",
        "image_url": "https://placehold.co/800x400/c2b3a4/FFFFFF?text=Victory+Day",
        "volunteers_needed": 100,
    },
    {
        "title_bn": "পহেলা বৈশাখ উদযাপন",
        "title_en": "Pohela Boishakh Celebration",
        "description_bn": "রমনা বটমূলে ছায়ানটের বর্ষবরণ ও মঙ্গল শোভাযাত্রার মাধ্যমে বাংলা নববর্ষ উদযাপন।",
        "description_en": "Celebrating the Bengali New Year with Chhayanaut's ceremony at Ramna Batamul and the Mangal Shobhajatra.",
        "category": "Culture",
        "date": "2027-04-14",
        "location": "রমনা পার্ক ও ঢাকা বিশ্ববিদ্যালয় এলাকা",
        "image_url": "https://placehold.co/800x400/f0e1d2/000000?text=Pohela+Boishakh",
        "volunteers_needed": 200,
    },
]


def seed_table(table: str, rows: list[dict]) -> int:
    """Insert rows only when the table is empty; returns rows inserted."""
    if SupabaseClient.fetch_rows(table, columns="id", limit=1):
        logger.info(f"{table}: already has data, skipping")
        return 0

    inserted = SupabaseClient.insert_rows(table, rows)
    logger.info(f"{table}: inserted {len(inserted)} rows")
    return len(inserted)


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    seed_table(PROJECTS_TABLE, PROJECTS)
    seed_table(EVENTS_TABLE, EVENTS)

    logger.info("Seed complete")


if __name__ == "__main__":
    main()
