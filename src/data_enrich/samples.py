"""Fixed sample data set used when running without the agent."""

from data_enrich.models.raw import RawRow
from data_enrich.models.record import EnrichedRecord, EnrichmentSummary

SAMPLE_PREVIEW_ROWS: list[RawRow] = [
    RawRow(name="Sarah Chen", company="TechFlow Inc"),
    RawRow(name="Marcus Johnson", company="DataVault Systems"),
    RawRow(name="Elena Rodriguez", company="CloudBridge Solutions"),
    RawRow(name="James Park", company="NexGen Analytics"),
    RawRow(name="Priya Sharma", company="InnoWave Corp"),
]

SAMPLE_ENRICHED: list[EnrichedRecord] = [
    EnrichedRecord(name="Sarah Chen", company="TechFlow Inc", revenue="$45M", sector="Enterprise SaaS",
                   decision_maker="Yes", job_title="VP of Engineering", confidence="High"),
    EnrichedRecord(name="Marcus Johnson", company="DataVault Systems", revenue="$120M", sector="Data Infrastructure",
                   decision_maker="Yes", job_title="CTO", confidence="High"),
    EnrichedRecord(name="Elena Rodriguez", company="CloudBridge Solutions", revenue="$28M", sector="Cloud Computing",
                   decision_maker="No", job_title="Senior Developer", confidence="Low"),
    EnrichedRecord(name="James Park", company="NexGen Analytics", revenue="$75M", sector="Business Intelligence",
                   decision_maker="Yes", job_title="Director of Product", confidence="High"),
    EnrichedRecord(name="Priya Sharma", company="InnoWave Corp", revenue="$15M", sector="IoT Solutions",
                   decision_maker="No", job_title="Data Analyst", confidence="Low"),
]

SAMPLE_SUMMARY = EnrichmentSummary(
    total_records=5,
    decision_makers_found=3,
    low_confidence_count=2,
    high_confidence_rate="60%",
)
