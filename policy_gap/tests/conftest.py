"""
Shared document fixtures.
"""

import pytest


PRIVACY_POLICY = """Privacy Policy

Effective Date: 2024-01-15
Version: 2.1

1. Introduction
This privacy policy explains how Example Health Cloud collects, uses and protects personal information. Our lawful basis for each processing activity is clearly identified and documented, and that basis is communicated to data subjects. We carry out a regular review of lawful basis validity. Depending on the activity we rely on consent, legitimate interest, contract or a legal obligation.

2. Information We Collect
We collect only data that is adequate, relevant and necessary for the stated purposes (data minimization and purpose limitation). Data collection is limited to those purposes and regular data audits are conducted.

3. Sharing With Third Parties
We share personal information with service providers who process it on our behalf under written contracts. We do not sell your personal information.

4. Data Retention
Data retention periods are defined for every category of record. We retain personal information only as long as necessary.

5. Your Rights
You have the right to access, rectification, erasure and portability of your data. These data subject rights, including the right to be forgotten, are handled through defined access procedures. Response timeframes: we respond to every request within 30 days, as specified by law. You may opt out of marketing at any time.

6. Security Measures
We follow privacy by design. Privacy impact assessments are conducted before launching new features, technical safeguards are implemented, and privacy-friendly default settings are used. A designated security officer runs a workforce training program, and access management procedures are documented alongside our incident response procedures. Facility access controls, workstation security measures, media controls and equipment disposal procedures protect our offices. Access control systems are implemented, audit logs are maintained, data integrity controls are in place, and transmission security measures including encryption protect protected health information.

7. Breach Notification
Our breach detection procedures support breach notification within 60 days, following a 60-day notification timeline. Each incident goes through our risk assessment methodology and meets our documentation requirements.

8. Legal Compliance
We comply with GDPR, CCPA and other applicable data protection laws.

9. Contact Us
Questions about this policy can be sent to our data protection officer at privacy@example.com.
"""


RESUME = """JANE DOE
Senior Software Engineer | jane.doe@example.com | (555) 010-2000

CAREER OBJECTIVE
Seeking a senior engineering role where I can apply 8 years of experience building reliable distributed systems and mentoring growing teams.

CORE COMPETENCIES
Python, Go, PostgreSQL, Kubernetes, AWS, system design, code review, technical leadership, agile delivery.

PROFESSIONAL EXPERIENCE

Senior Software Engineer, Acme Analytics (2019 - Present)
- Led a team of five engineers rebuilding the event ingestion pipeline, cutting latency by 40%.
- Designed a multi-region deployment strategy that raised availability to 99.95%.
- Introduced automated load testing and reduced production incidents by a third.

Software Engineer, Blue River Labs (2016 - 2019)
- Built REST services in Python and Go for a logistics platform serving 2 million shipments a month.
- Migrated legacy cron jobs to a managed workflow scheduler.
- Mentored three junior developers through their first production launches.

WORK EXPERIENCE (EARLIER)
Junior Developer, Northwind Traders (2015 - 2016)
- Maintained internal reporting tools and wrote data import scripts.

EDUCATION
Bachelor of Science in Computer Science, State University, 2015
Relevant coursework: algorithms, databases, operating systems, networks.

CERTIFICATIONS
AWS Certified Solutions Architect - Associate
Certified Kubernetes Application Developer

VOLUNTEERING
Organizer of the local Python user group, hosting monthly talks for 60+ attendees.

References available upon request.
"""


@pytest.fixture
def privacy_policy():
    """Complete privacy policy covering GDPR and HIPAA vocabulary."""
    return PRIVACY_POLICY


@pytest.fixture
def resume():
    """Software engineer resume."""
    return RESUME
