"""
Regulatory rule catalog used for benchmarking.

Each framework is a named regulatory standard made of rules. A rule carries
the keywords and benchmark criteria that the evaluators look for in a policy
document. The catalog is built once at import time and is read-only.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class Criticality(Enum):
    """Severity tier of a rule."""
    CRITICAL = "Critical"
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"

    @property
    def rank(self) -> int:
        """Sort rank, Critical first."""
        return _CRITICALITY_RANK[self]


_CRITICALITY_RANK = {
    Criticality.CRITICAL: 1,
    Criticality.HIGH: 2,
    Criticality.MEDIUM: 3,
    Criticality.LOW: 4,
}


@dataclass(frozen=True)
class Rule:
    """One compliance requirement within a framework."""

    title: str
    requirement: str
    category: str
    criticality: Criticality
    benchmark_criteria: tuple[str, ...]
    keywords: tuple[str, ...]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'title': self.title,
            'requirement': self.requirement,
            'category': self.category,
            'criticality': self.criticality.value,
            'benchmark_criteria': list(self.benchmark_criteria),
            'keywords': list(self.keywords),
        }


@dataclass(frozen=True)
class Framework:
    """A regulatory framework and its ordered rules."""

    framework_id: str
    name: str
    jurisdiction: str
    rules: Mapping[str, Rule]

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'framework_id': self.framework_id,
            'name': self.name,
            'jurisdiction': self.jurisdiction,
            'rules': {rule_id: rule.to_dict() for rule_id, rule in self.rules.items()},
        }


def _rule(title, requirement, category, criticality, criteria, keywords) -> Rule:
    return Rule(
        title=title,
        requirement=requirement,
        category=category,
        criticality=Criticality(criticality),
        benchmark_criteria=tuple(criteria),
        keywords=tuple(keywords),
    )


def _framework(framework_id: str, name: str, jurisdiction: str, rules: dict) -> Framework:
    return Framework(
        framework_id=framework_id,
        name=name,
        jurisdiction=jurisdiction,
        rules=MappingProxyType(dict(rules)),
    )


_CATALOG = [
    _framework("GDPR", "General Data Protection Regulation", "European Union", {
        "lawful_basis": _rule(
            "Lawful Basis for Processing",
            "Clear lawful basis must be established for all data processing activities",
            "Legal Foundation", "Critical",
            [
                "Lawful basis clearly identified and documented",
                "Basis communicated to data subjects",
                "Regular review of lawful basis validity",
            ],
            ["lawful basis", "consent", "legitimate interest", "contract", "legal obligation"],
        ),
        "data_minimization": _rule(
            "Data Minimization Principle",
            "Process only data that is adequate, relevant and limited to what is necessary",
            "Data Processing", "High",
            [
                "Data collection limited to stated purposes",
                "Regular data audits conducted",
                "Data retention periods defined",
            ],
            ["data minimization", "adequate", "relevant", "necessary", "purpose limitation"],
        ),
        "data_subject_rights": _rule(
            "Data Subject Rights",
            "Procedures for handling data subject requests",
            "Individual Rights", "Critical",
            [
                "Right to access procedures defined",
                "Right to rectification processes",
                "Right to erasure implementation",
                "Data portability mechanisms",
                "Response timeframes specified",
            ],
            ["data subject rights", "access", "rectification", "erasure", "portability",
             "right to be forgotten"],
        ),
        "privacy_by_design": _rule(
            "Privacy by Design",
            "Privacy considerations integrated into system design",
            "Technical Measures", "High",
            [
                "Privacy impact assessments conducted",
                "Technical safeguards implemented",
                "Privacy-friendly default settings",
            ],
            ["privacy by design", "impact assessment", "technical safeguards", "default settings"],
        ),
    }),
    _framework("HIPAA", "Health Insurance Portability and Accountability Act", "United States", {
        "administrative_safeguards": _rule(
            "Administrative Safeguards",
            "Implement administrative actions and policies to manage security measures",
            "Administrative", "Critical",
            [
                "Security officer designated",
                "Workforce training program established",
                "Access management procedures documented",
                "Incident response procedures defined",
            ],
            ["security officer", "workforce training", "access management", "incident response"],
        ),
        "physical_safeguards": _rule(
            "Physical Safeguards",
            "Physical measures to protect PHI and systems",
            "Physical Security", "High",
            [
                "Facility access controls implemented",
                "Workstation security measures",
                "Media controls established",
                "Equipment disposal procedures",
            ],
            ["facility access", "workstation security", "media controls", "equipment disposal"],
        ),
        "technical_safeguards": _rule(
            "Technical Safeguards",
            "Technology controls to protect PHI",
            "Technical Security", "Critical",
            [
                "Access control systems implemented",
                "Audit logs maintained",
                "Data integrity controls",
                "Transmission security measures",
            ],
            ["access control", "audit logs", "data integrity", "transmission security", "encryption"],
        ),
        "breach_notification": _rule(
            "Breach Notification",
            "Procedures for breach detection and notification",
            "Incident Management", "Critical",
            [
                "Breach detection procedures",
                "60-day notification timeline",
                "Risk assessment methodology",
                "Documentation requirements",
            ],
            ["breach notification", "60 days", "risk assessment", "documentation"],
        ),
    }),
    _framework("SOX", "Sarbanes-Oxley Act", "United States", {
        "internal_controls": _rule(
            "Internal Controls Over Financial Reporting",
            "Establish and maintain adequate internal control over financial reporting",
            "Financial Controls", "Critical",
            [
                "Control environment assessment documented",
                "Risk assessment procedures established",
                "Control activities documented",
                "Information systems controls",
                "Monitoring activities implemented",
            ],
            ["internal controls", "financial reporting", "control environment", "risk assessment"],
        ),
        "management_assessment": _rule(
            "Management Assessment",
            "Annual assessment of internal controls effectiveness",
            "Management Oversight", "High",
            [
                "Annual assessment conducted",
                "Material weaknesses identified",
                "Remediation plans documented",
                "Executive certification",
            ],
            ["management assessment", "annual", "material weaknesses", "certification"],
        ),
        "auditor_independence": _rule(
            "Auditor Independence",
            "Maintain auditor independence and objectivity",
            "Audit Governance", "High",
            [
                "Non-audit services restrictions",
                "Audit committee oversight",
                "Partner rotation requirements",
                "Conflicts of interest management",
            ],
            ["auditor independence", "audit committee", "partner rotation", "conflicts"],
        ),
    }),
    _framework("CCPA", "California Consumer Privacy Act", "California, United States", {
        "consumer_rights": _rule(
            "Consumer Privacy Rights",
            "Provide consumers with specific privacy rights",
            "Consumer Rights", "Critical",
            [
                "Right to know implementation",
                "Right to delete procedures",
                "Right to opt-out mechanisms",
                "Non-discrimination protections",
            ],
            ["right to know", "right to delete", "opt-out", "non-discrimination"],
        ),
        "privacy_notice": _rule(
            "Privacy Notice Requirements",
            "Comprehensive privacy notice disclosure",
            "Transparency", "High",
            [
                "Categories of information collected",
                "Sources of information disclosed",
                "Business purposes explained",
                "Third-party sharing disclosed",
            ],
            ["privacy notice", "categories", "sources", "business purposes", "third parties"],
        ),
    }),
    _framework("PCI_DSS", "Payment Card Industry Data Security Standard", "Global", {
        "network_security": _rule(
            "Network Security Controls",
            "Build and maintain secure network infrastructure",
            "Network Security", "Critical",
            [
                "Firewall configuration maintained",
                "Default passwords changed",
                "Network segmentation implemented",
                "Wireless security controls",
            ],
            ["firewall", "default passwords", "network segmentation", "wireless security"],
        ),
        "cardholder_data": _rule(
            "Cardholder Data Protection",
            "Protect stored cardholder data",
            "Data Protection", "Critical",
            [
                "Data encryption implemented",
                "Storage minimization practices",
                "Secure deletion procedures",
                "Key management processes",
            ],
            ["encryption", "cardholder data", "secure deletion", "key management"],
        ),
    }),
    _framework("ISO_27001", "ISO 27001 Information Security Management", "International", {
        "information_security_policy": _rule(
            "Information Security Policy",
            "Documented information security policy approved by management",
            "Governance", "Critical",
            [
                "Management commitment demonstrated",
                "Policy regularly reviewed and updated",
                "Communication to all personnel",
                "Compliance monitoring established",
            ],
            ["information security policy", "management approval", "policy review", "communication"],
        ),
        "risk_management": _rule(
            "Information Security Risk Management",
            "Systematic approach to managing information security risks",
            "Risk Management", "Critical",
            [
                "Risk assessment methodology defined",
                "Risk treatment plans implemented",
                "Regular risk reviews conducted",
                "Risk acceptance criteria established",
            ],
            ["risk assessment", "risk treatment", "risk management", "risk criteria"],
        ),
        "access_control": _rule(
            "Access Control Management",
            "Restrict access to information and information processing facilities",
            "Access Control", "High",
            [
                "Access control policy established",
                "User access provisioning procedures",
                "Regular access reviews conducted",
                "Privileged access management",
            ],
            ["access control", "user access", "privileged access", "access review"],
        ),
    }),
    _framework("FERPA", "Family Educational Rights and Privacy Act", "United States", {
        "educational_records": _rule(
            "Educational Records Protection",
            "Protect privacy of student educational records",
            "Privacy Protection", "Critical",
            [
                "Student records properly secured",
                "Access limited to authorized personnel",
                "Disclosure procedures documented",
                "Parent/student rights respected",
            ],
            ["educational records", "student privacy", "authorized access", "disclosure"],
        ),
        "directory_information": _rule(
            "Directory Information Management",
            "Handle directory information according to FERPA requirements",
            "Information Management", "Medium",
            [
                "Directory information defined",
                "Opt-out procedures available",
                "Annual notification provided",
                "Release procedures documented",
            ],
            ["directory information", "opt-out", "annual notice", "release procedures"],
        ),
    }),
    _framework("GLBA", "Gramm-Leach-Bliley Act", "United States", {
        "privacy_notices": _rule(
            "Privacy Notices",
            "Provide clear privacy notices to customers",
            "Privacy Communication", "Critical",
            [
                "Initial privacy notice provided",
                "Annual privacy notice delivered",
                "Opt-out notice included",
                "Clear and conspicuous format",
            ],
            ["privacy notice", "annual notice", "opt-out", "customer notification"],
        ),
        "safeguards_rule": _rule(
            "Safeguards Rule Compliance",
            "Implement comprehensive information security program",
            "Information Security", "Critical",
            [
                "Written information security program",
                "Designated security coordinator",
                "Regular security assessments",
                "Vendor management procedures",
            ],
            ["safeguards rule", "security program", "security coordinator", "vendor management"],
        ),
    }),
    _framework("COPPA", "Children's Online Privacy Protection Act", "United States", {
        "parental_consent": _rule(
            "Parental Consent Requirements",
            "Obtain verifiable parental consent before collecting children's information",
            "Consent Management", "Critical",
            [
                "Verifiable consent mechanisms",
                "Age verification procedures",
                "Consent documentation maintained",
                "Withdrawal procedures available",
            ],
            ["parental consent", "verifiable consent", "age verification", "children under 13"],
        ),
        "data_minimization": _rule(
            "Children's Data Minimization",
            "Collect only information reasonably necessary for participation",
            "Data Protection", "High",
            [
                "Data collection limited to necessity",
                "Purpose clearly defined",
                "Retention periods specified",
                "Secure deletion procedures",
            ],
            ["data minimization", "reasonably necessary", "participation", "children's data"],
        ),
    }),
    _framework("NIST_CSF", "NIST Cybersecurity Framework", "United States", {
        "identify_function": _rule(
            "Identify Function",
            "Develop organizational understanding to manage cybersecurity risk",
            "Risk Identification", "High",
            [
                "Asset management processes",
                "Risk assessment procedures",
                "Risk management strategy",
                "Supply chain risk management",
            ],
            ["asset management", "risk assessment", "cybersecurity risk", "supply chain"],
        ),
        "protect_function": _rule(
            "Protect Function",
            "Implement appropriate safeguards to ensure delivery of critical services",
            "Protective Measures", "Critical",
            [
                "Access control implementation",
                "Awareness and training programs",
                "Data security measures",
                "Protective technology deployed",
            ],
            ["access control", "awareness training", "data security", "protective technology"],
        ),
        "detect_function": _rule(
            "Detect Function",
            "Implement activities to identify cybersecurity events",
            "Detection Capabilities", "High",
            [
                "Continuous monitoring implemented",
                "Detection processes established",
                "Anomaly detection capabilities",
                "Security event correlation",
            ],
            ["continuous monitoring", "detection processes", "anomaly detection", "security events"],
        ),
    }),
    _framework("CAN_SPAM", "CAN-SPAM Act", "United States", {
        "header_accuracy": _rule(
            "Header Information Accuracy",
            "Don't use false or misleading header information",
            "Message Integrity", "Critical",
            [
                "From field accuracy verified",
                "Reply-to addresses functional",
                "Subject line truthfulness",
                "Routing information accuracy",
            ],
            ["header information", "from field", "reply-to", "subject line"],
        ),
        "unsubscribe_mechanisms": _rule(
            "Unsubscribe Mechanisms",
            "Provide clear and easy way to opt out",
            "Consent Management", "Critical",
            [
                "Clear unsubscribe option",
                "Working unsubscribe mechanism",
                "Prompt processing of requests",
                "No fee for unsubscribing",
            ],
            ["unsubscribe", "opt-out", "clear option", "no fee"],
        ),
    }),
    _framework("FISMA", "Federal Information Security Management Act", "United States", {
        "security_program": _rule(
            "Information Security Program",
            "Implement comprehensive information security program",
            "Security Management", "Critical",
            [
                "Security program documented",
                "Periodic assessments conducted",
                "Security plans maintained",
                "Continuous monitoring implemented",
            ],
            ["security program", "periodic assessments", "security plans", "continuous monitoring"],
        ),
        "incident_response": _rule(
            "Incident Response Procedures",
            "Establish incident response and reporting procedures",
            "Incident Management", "High",
            [
                "Incident response plan documented",
                "Response team established",
                "Reporting procedures defined",
                "Recovery procedures documented",
            ],
            ["incident response", "response plan", "reporting procedures", "recovery"],
        ),
    }),
]

FRAMEWORKS: Mapping[str, Framework] = MappingProxyType(
    {framework.framework_id: framework for framework in _CATALOG}
)


def get_framework(framework_id: str) -> Optional[Framework]:
    """Look up a framework by id, or None when it is not registered."""
    return FRAMEWORKS.get(framework_id)


def list_frameworks() -> list[str]:
    """Registered framework ids in catalog order."""
    return list(FRAMEWORKS)
