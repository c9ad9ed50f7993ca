"""
Tests for document classification.
"""

import pytest
from policy_gap.classification import DocumentClassifier, ClassificationResult


HANDLING_STANDARD = """Customer Information Handling Standard

1. Overview
This standard describes how the support department handles customer records. It applies to every team member who answers customer tickets. Information we collect includes names, email addresses and order history supplied during account registration and later support conversations.

2. Sharing
Records are shared with third-party service providers only when needed to deliver orders, and those service providers must follow these guidelines at all times.

3. Retention
We retain records for as long as necessary to provide support and then delete them from every support tool and backup.

4. Security
Security measures include encryption of stored records and access controls on support tools. Staff accounts are reviewed every quarter.

5. Your Rights
You have the right to request a copy of your records or ask us to correct them. Requests are answered by the support lead.

6. Compliance
We comply with applicable laws in every country where we operate and review this standard once a year.
"""

ORCHARD_NOTES = (
    "We collect apples from third parties. You have the right to object. "
    "We decide how long we keep the crates and we protect your data by locking the barn. "
    "We comply with local farming customs. "
    + "The weather in the valley was mild and the orchards were green. " * 80
)

SUMMER_NEWSLETTER = (
    "Summer Sale Newsletter\n\n"
    "Limited time offer: get 30% off every garden tool this week. Act now and enjoy "
    "free shipping on larger orders. Use code SUMMER at checkout.\n\n"
    "To send this newsletter we collect your email address. We retain it until you opt out, "
    "and our email service providers keep it protected with encryption. "
    "We comply with anti-spam rules.\n\n"
    + "Our garden tools are built from recycled steel and tested in real backyards. " * 15
)


class TestDocumentClassifier:
    """Test suite for DocumentClassifier."""

    @pytest.fixture
    def classifier(self):
        return DocumentClassifier()

    def test_valid_privacy_policy(self, classifier, privacy_policy):
        """Test that a complete privacy policy is accepted."""
        result = classifier.classify(privacy_policy)

        assert isinstance(result, ClassificationResult)
        assert result.is_valid
        assert result.document_type == 'policy'
        assert result.sub_type == 'privacy_policy'
        assert result.reason == 'strong_policy_indicator'
        assert result.confidence == 98
        assert 'privacy policy' in result.matched_indicators

    def test_privacy_policy_finds_all_sections(self, classifier, privacy_policy):
        """Test that all essential sections are found in a complete policy."""
        result = classifier.classify(privacy_policy)

        assert result.missing_sections == []
        assert result.completeness == 100
        assert result.privacy_score > 0

    def test_resume_rejected(self, classifier, resume):
        """Test that a resume is rejected as a non-policy document."""
        result = classifier.classify(resume)

        assert not result.is_valid
        assert result.document_type == 'resume'
        assert result.reason == 'non_policy_document'
        assert result.confidence >= 85

    def test_short_text_insufficient(self, classifier):
        """Test that short text is rejected before any scoring."""
        result = classifier.classify("We care about privacy.")

        assert not result.is_valid
        assert result.reason == 'insufficient_content'
        assert result.document_type == 'insufficient_content'
        assert result.confidence == 95

    def test_missing_sections_rejected(self, classifier):
        """Test that long text without privacy sections is rejected."""
        text = "The weather in the valley was mild and the orchards were green. " * 30
        result = classifier.classify(text)

        assert not result.is_valid
        assert result.reason == 'insufficient_privacy_content'
        assert result.completeness == 0
        assert result.confidence == 100
        assert len(result.missing_sections) == 6

    def test_composite_score_accepts_policy_without_indicator(self, classifier):
        """Test acceptance through the composite score threshold."""
        result = classifier.classify(HANDLING_STANDARD)

        assert result.is_valid
        assert result.document_type == 'policy'
        assert result.sub_type == 'general_policy'
        assert result.reason == 'policy_content_threshold_met'
        assert result.final_score >= result.adjusted_threshold
        assert 60 <= result.confidence <= 95

    def test_composite_score_rejects_thin_content(self, classifier):
        """Test rejection when sections are present but the score is too low."""
        result = classifier.classify(ORCHARD_NOTES)

        assert not result.is_valid
        assert result.document_type == 'non_policy'
        assert result.reason == 'below_policy_threshold'
        assert result.privacy_score == 0
        assert result.final_score < result.adjusted_threshold
        assert 50 <= result.confidence <= 90

    def test_classification_is_idempotent(self, classifier, privacy_policy, resume):
        """Test that repeated classification gives identical results."""
        for text in (privacy_policy, resume, HANDLING_STANDARD):
            assert classifier.classify(text).to_dict() == classifier.classify(text).to_dict()

    def test_non_text_input_rejected(self, classifier):
        """Test that non-string input fails fast."""
        with pytest.raises(TypeError):
            classifier.classify(None)

    def test_pdf_source_accepts_business_document(self, classifier):
        """Test the permissive path for PDF extracted text."""
        result = classifier.classify("Quarterly board minutes.", is_pdf_source=True)

        assert result.is_valid
        assert result.document_type == 'business_document'
        assert result.confidence == 90

    def test_pdf_source_rejects_resume(self, classifier, resume):
        """Test that resumes are rejected on the PDF path."""
        result = classifier.classify(resume, is_pdf_source=True)

        assert not result.is_valid
        assert result.document_type == 'resume'
        assert result.reason == 'non_business_document'

    def test_custom_minimum_length(self):
        """Test that the minimum length is configurable."""
        classifier = DocumentClassifier(min_length=10)
        result = classifier.classify("We care about privacy.")

        assert result.reason == 'insufficient_privacy_content'

    def test_to_dict_nests_scores(self, classifier, privacy_policy):
        """Test serialization layout."""
        data = classifier.classify(privacy_policy).to_dict()

        assert data['is_valid'] is True
        assert 'privacy_score' in data['scores']
        assert data['text_length'] == len(privacy_policy)

    def test_marketing_with_all_sections_rejected(self, classifier):
        """Test fast rejection of marketing copy that passes the section gate."""
        result = classifier.classify(SUMMER_NEWSLETTER)

        assert len(result.found_sections) == 6
        assert not result.is_valid
        assert result.document_type == 'marketing'
        assert result.reason == 'non_policy_document'
        assert result.confidence == 90
        assert result.privacy_score > 0

    def test_pdf_generic_resume_vocabulary_rejected(self, classifier):
        """Test PDF rejection on generic resume vocabulary alone."""
        text = "Resume\nSkills: Python, SQL\nEducation: State University\nHobbies: chess"
        result = classifier.classify(text, is_pdf_source=True)

        assert not result.is_valid
        assert result.document_type == 'resume'
        assert result.reason == 'non_business_document'
        assert len(result.matched_indicators) == 4
        assert result.confidence == 90

    def test_pdf_two_generic_hits_accepted(self, classifier):
        """Test that two generic resume hits do not reject a PDF."""
        text = "Skills: negotiation\nEducation: ongoing training for the procurement team."
        result = classifier.classify(text, is_pdf_source=True)

        assert result.is_valid
        assert result.reason == 'pdf_business_document'
