"""Seed project history for the Signest estimator.

A small set of representative completed jobs, used when no project file
is configured so the estimator and dashboard have data to work with.
"""

from datetime import UTC, datetime

from signest.models.enums import ComplexityTier, QualityTier, SignType
from signest.models.project import HistoricalProject

SEED_PROJECTS: list[HistoricalProject] = [
    # --- Channel letters ---
    HistoricalProject(
        id="seed-channel-letters-cafe",
        name="Corner Cafe storefront letters",
        sign_type=SignType.CHANNEL_LETTERS,
        height=2.5,
        width=12.0,
        material_type="aluminum",
        paint_colors=2,
        has_lighting=True,
        quality=QualityTier.STANDARD,
        complexity=ComplexityTier.MEDIUM,
        total_cost=4500.0,
        material_cost=1800.0,
        labor_cost=2700.0,
        description="Face-lit channel letters on raceway",
        created_at=datetime(2025, 3, 14, tzinfo=UTC),
        updated_at=datetime(2025, 3, 14, tzinfo=UTC),
    ),
    HistoricalProject(
        id="seed-channel-letters-bank",
        name="Regional bank halo letters",
        sign_type=SignType.CHANNEL_LETTERS,
        height=3.0,
        width=18.0,
        material_type="aluminum",
        paint_colors=1,
        has_lighting=True,
        quality=QualityTier.PREMIUM,
        complexity=ComplexityTier.HIGH,
        total_cost=9800.0,
        material_cost=3900.0,
        labor_cost=5900.0,
        description="Reverse-lit halo letters, stud mounted",
        created_at=datetime(2025, 5, 2, tzinfo=UTC),
        updated_at=datetime(2025, 5, 2, tzinfo=UTC),
    ),
    # --- Pylons ---
    HistoricalProject(
        id="seed-pylon-plaza",
        name="Shopping plaza pylon",
        sign_type=SignType.PYLON,
        height=25.0,
        width=8.0,
        material_type="steel",
        paint_colors=3,
        has_lighting=True,
        quality=QualityTier.PREMIUM,
        complexity=ComplexityTier.HIGH,
        total_cost=38500.0,
        material_cost=16200.0,
        labor_cost=22300.0,
        description="Double-sided multi-tenant pylon with LED cabinets",
        created_at=datetime(2025, 1, 22, tzinfo=UTC),
        updated_at=datetime(2025, 2, 3, tzinfo=UTC),
    ),
    HistoricalProject(
        id="seed-pylon-gas-station",
        name="Gas station price pylon",
        sign_type=SignType.PYLON,
        height=18.0,
        width=6.0,
        material_type="aluminum",
        paint_colors=2,
        has_lighting=True,
        quality=QualityTier.STANDARD,
        complexity=ComplexityTier.MEDIUM,
        total_cost=21000.0,
        material_cost=8400.0,
        labor_cost=12600.0,
        created_at=datetime(2025, 4, 9, tzinfo=UTC),
        updated_at=datetime(2025, 4, 9, tzinfo=UTC),
    ),
    # --- Monuments ---
    HistoricalProject(
        id="seed-monument-church",
        name="Church entrance monument",
        sign_type=SignType.MONUMENT,
        height=4.0,
        width=8.0,
        material_type="composite",
        paint_colors=2,
        has_lighting=False,
        quality=QualityTier.STANDARD,
        complexity=ComplexityTier.MEDIUM,
        total_cost=7200.0,
        material_cost=3100.0,
        labor_cost=4100.0,
        description="Masonry base with routed composite panels",
        created_at=datetime(2025, 2, 17, tzinfo=UTC),
        updated_at=datetime(2025, 2, 17, tzinfo=UTC),
    ),
    HistoricalProject(
        id="seed-monument-office-park",
        name="Office park monument",
        sign_type=SignType.MONUMENT,
        height=5.0,
        width=10.0,
        material_type="aluminum",
        paint_colors=3,
        has_lighting=True,
        quality=QualityTier.PREMIUM,
        complexity=ComplexityTier.HIGH,
        total_cost=14800.0,
        material_cost=6000.0,
        labor_cost=8800.0,
        created_at=datetime(2025, 6, 11, tzinfo=UTC),
        updated_at=datetime(2025, 6, 11, tzinfo=UTC),
    ),
    # --- Wall signs ---
    HistoricalProject(
        id="seed-wall-salon",
        name="Salon wall cabinet",
        sign_type=SignType.WALL,
        height=3.0,
        width=10.0,
        material_type="acrylic",
        paint_colors=2,
        has_lighting=True,
        quality=QualityTier.STANDARD,
        complexity=ComplexityTier.LOW,
        total_cost=3200.0,
        material_cost=1400.0,
        labor_cost=1800.0,
        created_at=datetime(2025, 3, 28, tzinfo=UTC),
        updated_at=datetime(2025, 3, 28, tzinfo=UTC),
    ),
    HistoricalProject(
        id="seed-wall-warehouse",
        name="Warehouse painted wall panel",
        sign_type=SignType.WALL,
        height=4.0,
        width=16.0,
        material_type="vinyl",
        paint_colors=1,
        has_lighting=False,
        quality=QualityTier.BASIC,
        complexity=ComplexityTier.LOW,
        total_cost=1900.0,
        material_cost=700.0,
        labor_cost=1200.0,
        description="Vinyl graphics on ACM panel",
        created_at=datetime(2025, 5, 19, tzinfo=UTC),
        updated_at=datetime(2025, 5, 19, tzinfo=UTC),
    ),
    # --- Flat cutouts ---
    HistoricalProject(
        id="seed-flat-cutout-lobby",
        name="Lobby logo cutout",
        sign_type=SignType.FLAT_CUTOUT,
        height=2.0,
        width=6.0,
        material_type="acrylic",
        paint_colors=2,
        has_lighting=False,
        quality=QualityTier.PREMIUM,
        complexity=ComplexityTier.MEDIUM,
        total_cost=2400.0,
        material_cost=900.0,
        labor_cost=1500.0,
        created_at=datetime(2025, 6, 30, tzinfo=UTC),
        updated_at=datetime(2025, 6, 30, tzinfo=UTC),
    ),
    HistoricalProject(
        id="seed-flat-cutout-winery",
        name="Winery tasting room letters",
        sign_type=SignType.FLAT_CUTOUT,
        height=1.5,
        width=9.0,
        material_type="wood",
        paint_colors=1,
        has_lighting=False,
        quality=QualityTier.STANDARD,
        complexity=ComplexityTier.LOW,
        total_cost=1650.0,
        material_cost=600.0,
        labor_cost=1050.0,
        created_at=datetime(2025, 7, 8, tzinfo=UTC),
        updated_at=datetime(2025, 7, 8, tzinfo=UTC),
    ),
]
