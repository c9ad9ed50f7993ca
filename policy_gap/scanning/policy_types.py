"""
Policy-type templates and compliance citation tables.

Each template lists the keywords that identify a policy type and, per
section, the keywords that mark the section plus the elements a complete
section is expected to contain.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping


@dataclass(frozen=True)
class PolicySection:
    """Keywords and required elements of one section of a policy type."""

    keywords: tuple[str, ...]
    required: tuple[str, ...]


@dataclass(frozen=True)
class PolicyType:
    """A policy-type template."""

    type_id: str
    name: str
    keywords: tuple[str, ...]
    sections: Mapping[str, PolicySection]


@dataclass(frozen=True)
class CitationTable:
    """Specific citations and general keywords of a compliance framework."""

    framework: str
    kind: str
    citations: tuple[str, ...]
    keywords: tuple[str, ...]


def _policy(type_id, name, keywords, sections):
    return PolicyType(
        type_id=type_id,
        name=name,
        keywords=tuple(keywords),
        sections=MappingProxyType({
            key: PolicySection(keywords=tuple(kw), required=tuple(req))
            for key, (kw, req) in sections.items()
        }),
    )


_TEMPLATES = [
    _policy('privacy', 'Privacy Policy',
            ['privacy policy', 'data protection', 'personal information', 'data collection'], {
                'introduction': (
                    ['purpose', 'scope', 'introduction', 'overview'],
                    ['purpose of policy', 'data controller information']),
                'data_collection': (
                    ['information collected', 'data collection', 'personal data', 'what we collect'],
                    ['types of data collected', 'collection methods', 'cookies and tracking']),
                'data_usage': (
                    ['how data is used', 'purpose of processing', 'data processing'],
                    ['processing purposes', 'legal basis', 'automated decision making']),
                'data_sharing': (
                    ['data sharing', 'third parties', 'disclosure', 'recipients'],
                    ['third party sharing', 'international transfers', 'service providers']),
                'user_rights': (
                    ['user rights', 'your rights', 'data subject rights', 'privacy rights'],
                    ['access rights', 'deletion rights', 'correction rights', 'opt-out']),
                'security': (
                    ['data security', 'security measures', 'protection', 'safeguards'],
                    ['encryption', 'access controls', 'incident response']),
                'retention': (
                    ['data retention', 'storage period', 'how long', 'retention period'],
                    ['retention periods', 'deletion timelines', 'archival policies']),
                'updates': (
                    ['policy updates', 'changes', 'modifications', 'amendments'],
                    ['notification process', 'effective date', 'version control']),
                'contact': (
                    ['contact', 'privacy officer', 'data protection officer', 'questions'],
                    ['contact information', 'complaint process', 'regulatory authority']),
            }),
    _policy('human_rights', 'Human Rights Policy',
            ['human rights', 'ethical practices', 'labor standards', 'worker rights'], {
                'commitment': (
                    ['commitment', 'statement', 'principles', 'values'],
                    ['human rights commitment', 'scope of application']),
                'non_discrimination': (
                    ['non-discrimination', 'inclusion', 'diversity', 'equal opportunity'],
                    ['anti-discrimination measures', 'inclusion practices']),
                'labor_practices': (
                    ['labor practices', 'working conditions', 'employment', 'wages'],
                    ['fair wages', 'working hours', 'child labor prohibition', 'forced labor']),
                'workplace_safety': (
                    ['workplace safety', 'safe working conditions', 'health and safety'],
                    ['safety measures', 'health protocols', 'incident reporting']),
                'freedom': (
                    ['freedom of association', 'collective bargaining', 'unionization'],
                    ['association rights', 'collective bargaining rights']),
                'sourcing': (
                    ['ethical sourcing', 'supply chain', 'conflict minerals', 'responsible sourcing'],
                    ['supplier standards', 'due diligence', 'conflict minerals']),
                'whistleblower': (
                    ['whistleblower', 'reporting', 'grievance', 'complaints'],
                    ['reporting mechanisms', 'protection measures', 'investigation process']),
            }),
    _policy('terms_of_service', 'Terms of Service',
            ['terms of service', 'terms and conditions', 'user agreement', 'service agreement'], {
                'acceptance': (
                    ['acceptance', 'agreement', 'binding', 'consent'],
                    ['acceptance mechanism', 'binding nature', 'capacity requirements']),
                'user_responsibilities': (
                    ['user responsibilities', 'prohibited activities', 'restrictions', 'obligations'],
                    ['prohibited uses', 'user conduct', 'compliance obligations']),
                'intellectual_property': (
                    ['intellectual property', 'copyright', 'trademark', 'proprietary rights'],
                    ['ownership rights', 'usage permissions', 'infringement policy']),
                'liability': (
                    ['limitation of liability', 'disclaimers', 'warranties', 'damages'],
                    ['liability limitations', 'warranty disclaimers', 'indemnification']),
                'termination': (
                    ['termination', 'suspension', 'account closure', 'breach'],
                    ['termination conditions', 'effect of termination', 'data handling']),
                'disputes': (
                    ['dispute resolution', 'governing law', 'arbitration', 'jurisdiction'],
                    ['governing law', 'dispute process', 'jurisdiction']),
            }),
    _policy('acceptable_use', 'Acceptable Use Policy',
            ['acceptable use', 'usage policy', 'prohibited activities', 'user conduct'], {
                'prohibited_activities': (
                    ['prohibited', 'forbidden', 'not allowed', 'restrictions'],
                    ['illegal activities', 'harmful content', 'system abuse']),
                'content_restrictions': (
                    ['content restrictions', 'content guidelines', 'prohibited content'],
                    ['content standards', 'intellectual property', 'harmful content']),
                'consequences': (
                    ['consequences', 'violations', 'enforcement', 'penalties'],
                    ['violation consequences', 'enforcement procedures', 'appeal process']),
            }),
    _policy('cookie_policy', 'Cookie Policy',
            ['cookie policy', 'tracking technologies', 'cookies', 'web beacons'], {
                'cookie_types': (
                    ['types of cookies', 'cookie categories', 'session cookies', 'persistent cookies'],
                    ['cookie classifications', 'third-party cookies', 'cookie duration']),
                'purpose': (
                    ['purpose of cookies', 'why we use cookies', 'cookie functions'],
                    ['functionality cookies', 'analytics cookies', 'advertising cookies']),
                'consent': (
                    ['cookie consent', 'opt-out', 'cookie settings', 'preferences'],
                    ['consent mechanism', 'opt-out options', 'preference management']),
            }),
    _policy('data_processing', 'Data Processing Agreement',
            ['data processing agreement', 'DPA', 'controller', 'processor'], {
                'roles': (
                    ['data controller', 'data processor', 'roles', 'responsibilities'],
                    ['controller obligations', 'processor obligations', 'role definitions']),
                'processing_details': (
                    ['processing details', 'data categories', 'processing purposes'],
                    ['data categories', 'processing purposes', 'data subjects']),
                'security': (
                    ['security measures', 'technical safeguards', 'organizational measures'],
                    ['technical measures', 'organizational measures', 'incident response']),
                'subprocessors': (
                    ['subprocessors', 'third parties', 'sub-contractors'],
                    ['subprocessor list', 'authorization process', 'liability']),
                'breaches': (
                    ['data breach', 'security incident', 'notification'],
                    ['breach notification', 'timeline requirements', 'assistance obligations']),
            }),
    _policy('accessibility', 'Accessibility Policy',
            ['accessibility', 'WCAG', 'disability', 'assistive technology'], {
                'commitment': (
                    ['accessibility commitment', 'inclusive design', 'accessibility standards'],
                    ['WCAG compliance', 'accessibility goals', 'implementation timeline']),
                'features': (
                    ['accessibility features', 'assistive technology', 'accommodations'],
                    ['supported technologies', 'accessibility features', 'alternative formats']),
                'feedback': (
                    ['accessibility feedback', 'complaints', 'suggestions'],
                    ['feedback mechanism', 'contact information', 'response timeline']),
            }),
    _policy('security', 'Security Policy',
            ['security policy', 'information security', 'cybersecurity', 'data protection'], {
                'infrastructure': (
                    ['infrastructure security', 'network security', 'system security'],
                    ['security controls', 'access management', 'monitoring systems']),
                'incident': (
                    ['incident response', 'security incident', 'breach response'],
                    ['incident procedures', 'response team', 'notification process']),
                'training': (
                    ['security training', 'employee training', 'awareness'],
                    ['training programs', 'awareness initiatives', 'compliance requirements']),
                'testing': (
                    ['penetration testing', 'security testing', 'vulnerability assessment'],
                    ['testing procedures', 'audit schedules', 'remediation process']),
            }),
    _policy('refund', 'Refund & Cancellation Policy',
            ['refund policy', 'cancellation', 'return policy', 'money back'], {
                'eligibility': (
                    ['refund eligibility', 'qualifying conditions', 'requirements'],
                    ['eligibility criteria', 'time limits', 'conditions']),
                'process': (
                    ['refund process', 'how to request', 'procedure'],
                    ['request procedure', 'required information', 'processing time']),
                'cancellation': (
                    ['cancellation terms', 'subscription cancellation', 'termination'],
                    ['cancellation procedure', 'notice requirements', 'effective date']),
            }),
    _policy('environmental', 'Environmental Policy',
            ['environmental policy', 'sustainability', 'carbon footprint', 'green practices'], {
                'carbon_footprint': (
                    ['carbon footprint', 'emissions reduction', 'climate change'],
                    ['emission goals', 'reduction strategies', 'measurement methods']),
                'waste_management': (
                    ['waste management', 'e-waste', 'recycling', 'disposal'],
                    ['waste reduction', 'recycling programs', 'disposal methods']),
                'green_practices': (
                    ['green practices', 'sustainable operations', 'renewable energy'],
                    ['green hosting', 'energy efficiency', 'sustainable sourcing']),
            }),
]

POLICY_TYPES: Mapping[str, PolicyType] = MappingProxyType(
    {template.type_id: template for template in _TEMPLATES}
)


_CITATIONS = [
    CitationTable(
        framework='GDPR',
        kind='articles',
        citations=('Article 5', 'Article 6', 'Article 7', 'Article 13', 'Article 17',
                   'Article 20', 'Article 25', 'Article 32', 'Article 33', 'Article 35'),
        keywords=('GDPR', 'General Data Protection Regulation', 'data protection', 'EU regulation'),
    ),
    CitationTable(
        framework='CCPA',
        kind='sections',
        citations=('1798.100', '1798.105', '1798.110', '1798.115', '1798.120', '1798.140'),
        keywords=('CCPA', 'California Consumer Privacy Act', 'consumer rights', 'personal information'),
    ),
    CitationTable(
        framework='HIPAA',
        kind='safeguards',
        citations=('Administrative', 'Physical', 'Technical'),
        keywords=('HIPAA', 'Health Insurance Portability', 'protected health information', 'PHI'),
    ),
    CitationTable(
        framework='SOX',
        kind='sections',
        citations=('Section 302', 'Section 404', 'Section 409', 'Section 802'),
        keywords=('Sarbanes-Oxley', 'SOX', 'financial reporting', 'internal controls'),
    ),
    CitationTable(
        framework='PCI DSS',
        kind='requirements',
        citations=('Requirement 1', 'Requirement 2', 'Requirement 3', 'Requirement 4'),
        keywords=('PCI DSS', 'Payment Card Industry', 'cardholder data', 'payment security'),
    ),
]

COMPLIANCE_CITATIONS: Mapping[str, CitationTable] = MappingProxyType(
    {table.framework: table for table in _CITATIONS}
)
