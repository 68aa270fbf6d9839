"""
Tests for release tag classification and remote artifact parsing.
"""

import pytest
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from models.artifact import RemoteArtifact
from models.exceptions import InvalidVersionError
from models.release import StabilityTier, UpdateResult, classify, tier_equals


class TestClassify:
    """Tests for the release tag classifier."""

    def test_case_insensitive_aliases(self):
        assert classify('BETA') == classify('beta') == classify('b') == StabilityTier.BETA

    @pytest.mark.parametrize('fragment, tier', [
        ('a', StabilityTier.ALPHA),
        ('Alpha', StabilityTier.ALPHA),
        ('pre', StabilityTier.PRE_RELEASE),
        ('PR', StabilityTier.PRE_RELEASE),
        ('p', StabilityTier.PRE_RELEASE),
        ('pre-release', StabilityTier.PRE_RELEASE),
        ('r', StabilityTier.RELEASE),
        ('rc', StabilityTier.RELEASE),
        ('release', StabilityTier.RELEASE),
    ])
    def test_alias_table(self, fragment, tier):
        assert classify(fragment) is tier

    def test_unknown_defaults_to_release(self):
        assert classify('unknown-tag') == StabilityTier.RELEASE
        assert classify('snapshot') == StabilityTier.RELEASE
        assert classify('') == StabilityTier.RELEASE
        assert classify(None) == StabilityTier.RELEASE

    def test_tier_ordering(self):
        assert StabilityTier.ALPHA < StabilityTier.BETA < StabilityTier.PRE_RELEASE < StabilityTier.RELEASE
        assert max(StabilityTier) is StabilityTier.RELEASE

    def test_tier_equals(self):
        assert tier_equals(StabilityTier.BETA, 'b')
        assert tier_equals(StabilityTier.RELEASE, 'whatever')
        assert not tier_equals(StabilityTier.RELEASE, 'alpha')

    def test_failure_results(self):
        assert UpdateResult.FAIL_CONNECTION.is_failure
        assert UpdateResult.FAIL_VERSION.is_failure
        assert not UpdateResult.LATEST.is_failure


class TestRemoteArtifact:
    """Tests for RemoteArtifact parsing."""

    def test_parse_plain_version(self):
        artifact = RemoteArtifact.parse('1.2.0')
        assert artifact.version == '1.2.0'
        assert artifact.tier is StabilityTier.RELEASE
        assert artifact.raw_version == '1.2.0'

    def test_parse_extracts_numeric_part(self):
        assert RemoteArtifact.parse('v2.4.1').version == '2.4.1'
        assert RemoteArtifact.parse('MyPlugin 3.1').version == '3.1'
        assert RemoteArtifact.parse('1.2.3.4.5').version == '1.2.3.4'

    @pytest.mark.parametrize('raw, tier', [
        ('1.3.0-beta', StabilityTier.BETA),
        ('1.3.0-BETA.2', StabilityTier.BETA),
        ('1.3.0b1', StabilityTier.BETA),
        ('2.0-alpha', StabilityTier.ALPHA),
        ('2.0.0-pre-release', StabilityTier.PRE_RELEASE),
        ('2.0.0-SNAPSHOT', StabilityTier.RELEASE),
        ('2.0.0-rc.1', StabilityTier.RELEASE),
        ('2.0.0-rc1', StabilityTier.RELEASE),
        ('Release 2.0', StabilityTier.RELEASE),
        ('1.3.0-prerelease', StabilityTier.PRE_RELEASE),
        ('1.3.0-preview', StabilityTier.PRE_RELEASE),
        ('v1.3.0-PreRelease2', StabilityTier.PRE_RELEASE),
        ('1.3.0-betatest', StabilityTier.BETA),
        ('1.0-alpha3', StabilityTier.ALPHA),
        ('1.3.0-pr2', StabilityTier.PRE_RELEASE),
    ])
    def test_parse_tier(self, raw, tier):
        assert RemoteArtifact.parse(raw).tier is tier

    def test_letters_inside_words_are_not_tags(self):
        assert RemoteArtifact.parse('Plugin-1.0.0').tier is StabilityTier.RELEASE
        assert RemoteArtifact.parse('stable 1.0.0').tier is StabilityTier.RELEASE
        assert RemoteArtifact.parse('ProtocolLib 5.0.0').tier is StabilityTier.RELEASE
        assert RemoteArtifact.parse('Improved Edition 2.1').tier is StabilityTier.RELEASE

    def test_parse_is_idempotent(self):
        first = RemoteArtifact.parse('v1.3.0-beta')
        second = RemoteArtifact.parse(first.version)
        assert second.version == first.version == '1.3.0'

    @pytest.mark.parametrize('raw', ['latest', '', '1', 'version one', None])
    def test_parse_without_numeric_version_fails(self, raw):
        with pytest.raises(InvalidVersionError):
            RemoteArtifact.parse(raw)

    def test_from_provider(self, make_provider):
        provider = make_provider('2.0.0-beta')
        provider.initialize()
        artifact = RemoteArtifact.from_provider(provider)
        assert artifact.version == '2.0.0'
        assert artifact.tier is StabilityTier.BETA
        assert not artifact.is_stable

    def test_from_provider_without_version(self, make_provider):
        provider = make_provider(None)
        assert RemoteArtifact.from_provider(provider) is None

    def test_str(self):
        assert str(RemoteArtifact.parse('1.0')) == '1.0'
        assert str(RemoteArtifact.parse('1.0-beta')) == '1.0 (BETA)'


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
