"""
Course Compass Degree Advisor Package
=====================================

Degree-progress tracking for University of Arizona undergraduates.

ARCHITECTURE OVERVIEW
---------------------

┌─────────────────────────────────────────────────────────────────────────┐
│                         ALGORITHM LAYER                                  │
│        (Pure logic - returns data structures, NO UI/printing)           │
│                                                                         │
│  ┌──────────────┐  ┌─────────────────┐  ┌────────────────────────────┐  │
│  │CatalogLoader │  │TranscriptParser │  │   RecommendationEngine     │  │
│  │  (I/O)       │  │ (pasted text)   │  │ (minors + next courses)    │  │
│  └──────────────┘  └─────────────────┘  └────────────────────────────┘  │
│                                                                         │
│  ┌──────────────────────┐ ┌──────────────────────┐ ┌─────────────────┐  │
│  │ GenEdProgressEngine  │ │ DegreeProgressEngine │ │GraduationEstim. │  │
│  │ (gen-ed buckets)     │ │ (majors & minors)    │ │ (120 units)     │  │
│  └──────────────────────┘ └──────────────────────┘ └─────────────────┘  │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   │ Returns dataclasses
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                      PRESENTATION LAYER                                  │
│           (UI only - can be swapped without touching algorithm)         │
│                                                                         │
│  ┌─────────────────────────────────────────────────────────────────┐   │
│  │                    TerminalDisplay                               │   │
│  │  • Formats and prints to console                                 │   │
│  └─────────────────────────────────────────────────────────────────┘   │
└─────────────────────────────────────────────────────────────────────────┘
                                   │
                                   ▼
┌─────────────────────────────────────────────────────────────────────────┐
│                        DegreeAdvisor                                     │
│   (Orchestrator - connects ProfileStore + algorithm to presentation)    │
└─────────────────────────────────────────────────────────────────────────┘

PACKAGE STRUCTURE
-----------------

advising/
├── __init__.py          # This file - main exports
├── config.py            # Configuration constants
├── exceptions.py        # AdvisingError hierarchy
├── advisor.py           # DegreeAdvisor orchestrator
├── cli.py               # Command-line interface
│
├── models/              # Data classes and enums
│   ├── course.py        # CompletedCourse, GenEdCourse, CatalogCourse
│   ├── profile.py       # StudentProfile, GenEdChecks
│   ├── progress.py      # GenEdProgress, MajorProgress, MinorProgress, ...
│   └── recommendation.py # SuggestedMinor, RecommendedCourse
│
├── data/                # Catalog loading and transcript parsing
│   ├── loader.py        # CatalogLoader
│   ├── parser.py        # TranscriptParser
│   └── catalog/         # Bundled JSON requirement data
│
├── engines/             # Progress and recommendation engines
│   ├── gen_ed.py        # GenEdProgressEngine
│   ├── degree.py        # DegreeProgressEngine
│   ├── recommendation.py # RecommendationEngine
│   └── graduation.py    # GraduationEstimator
│
├── storage/             # Profile persistence
│   ├── backends.py      # KeyValueStore, MemoryStore, JsonFileStore
│   ├── migrations.py    # upgrade_profile_record
│   └── profiles.py      # ProfileStore
│
├── chat/                # Advisor chat
│   ├── context.py       # build_system_prompt
│   └── client.py        # AdvisorChatClient
│
└── ui/                  # User interface implementations
    └── terminal.py      # TerminalDisplay

USAGE
-----

Basic usage:

    from advising import CatalogLoader, GenEdProgressEngine, ProfileStore, MemoryStore

    store = ProfileStore(MemoryStore())
    catalog = CatalogLoader()
    store.ensure_seeded(catalog.seed_profile)

    progress = GenEdProgressEngine(catalog).calculate(store.current_profile())
    print(progress.overall_percent)

Running from command line:

    python -m advising

"""

# Version
__version__ = "1.0.0"

# Main exports
from .advisor import DegreeAdvisor
from .cli import main

# Model exports (for programmatic use)
from .models import (
    CompletedCourse,
    CatalogCourse,
    GenEdCourse,
    CourseStatus,
    StudentProfile,
    GenEdChecks,
    DomainStatus,
    GenEdProgress,
    MajorProgress,
    MajorBreakdown,
    MinorProgress,
    GraduationEstimate,
    SuggestedMinor,
    RecommendedCourse,
)

# Engine exports
from .engines import (
    GenEdProgressEngine,
    DegreeProgressEngine,
    RecommendationEngine,
    GraduationEstimator,
)

# Data exports
from .data import CatalogLoader, TranscriptParser

# Storage exports
from .storage import KeyValueStore, MemoryStore, JsonFileStore, ProfileStore, upgrade_profile_record

# Chat exports
from .chat import AdvisorChatClient, ChatMessage, build_system_prompt

# Errors
from .exceptions import AdvisingError, ProfileNotFoundError, ProfileValidationError

# UI exports
from .ui import TerminalDisplay

__all__ = [
    # Version
    "__version__",
    # Main entry points
    "DegreeAdvisor",
    "main",
    # Models
    "CompletedCourse",
    "CatalogCourse",
    "GenEdCourse",
    "CourseStatus",
    "StudentProfile",
    "GenEdChecks",
    "DomainStatus",
    "GenEdProgress",
    "MajorProgress",
    "MajorBreakdown",
    "MinorProgress",
    "GraduationEstimate",
    "SuggestedMinor",
    "RecommendedCourse",
    # Engines
    "GenEdProgressEngine",
    "DegreeProgressEngine",
    "RecommendationEngine",
    "GraduationEstimator",
    # Data
    "CatalogLoader",
    "TranscriptParser",
    # Storage
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "ProfileStore",
    "upgrade_profile_record",
    # Chat
    "AdvisorChatClient",
    "ChatMessage",
    "build_system_prompt",
    # Errors
    "AdvisingError",
    "ProfileNotFoundError",
    "ProfileValidationError",
    # UI
    "TerminalDisplay",
]
