"""
URL Health Probe

Probes operator-declared HTTP endpoints in two criticality tiers and rolls
the outcomes into a pass/warn/fail health report.

Layer Structure:
- Domain: measurements, probe outcomes, the tier-aware rollup and ports
- Application: the health report use case and its health+json DTOs
- Infrastructure: the httpx transport, probe executor and concurrent aggregator
- Presentation: the /health endpoint
- Shared: logging and cross-layer enums
- Main: settings, composition root and entry points
"""
