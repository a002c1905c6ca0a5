"""Unit tests for the Jinja2 authorization block tags.

Tests cover:
- Compilation of each tag into a guarded If node calling the bound query
- Expressions handed to the service verbatim (literals, context variables)
- Optional else branch
- Conflict detection against Jinja2 keywords and other extensions
- Render-time errors (unclosed block, missing service)
"""

import pytest
from jinja2 import DictLoader, Environment, TemplateSyntaxError, nodes
from jinja2.ext import Extension

from sentinel.core.exceptions import DirectiveConflictError
from sentinel.infrastructure.templating import (
    DIRECTIVE_BINDINGS,
    SentinelExtension,
    directive_tokens,
    find_conflicts,
    register_directives,
)
from sentinel.infrastructure.templating.directives import RESERVED_TAGS
from tests.conftest import RecordingService


class RoleTagExtension(Extension):
    """Third-party extension already claiming the ``role`` tag."""

    tags = {"role"}

    def parse(self, parser):
        raise NotImplementedError


@pytest.fixture
def env(recording_service):
    environment = Environment(autoescape=False)
    register_directives(environment, recording_service)
    return environment


@pytest.mark.unit
class TestDirectiveBindings:
    """Test the static tag table."""

    def test_six_tokens_in_order(self):
        assert directive_tokens() == [
            "can",
            "endcan",
            "canatleast",
            "endcanatleast",
            "role",
            "endrole",
        ]

    def test_queries(self):
        assert {b.open_tag: b.query for b in DIRECTIVE_BINDINGS} == {
            "can": "can",
            "canatleast": "can_at_least",
            "role": "is_role",
        }

    def test_tokens_do_not_shadow_jinja_keywords(self):
        assert RESERVED_TAGS.isdisjoint(directive_tokens())

    def test_extension_claims_open_tags_only(self):
        assert SentinelExtension.tags == {"can", "canatleast", "role"}


@pytest.mark.unit
class TestCompilation:
    """Test the AST produced for each tag."""

    @pytest.mark.parametrize(
        ("source", "query"),
        [
            ("{% can 'edit-post' %}x{% endcan %}", "can"),
            ("{% canatleast ['a', 'b'] %}x{% endcanatleast %}", "can_at_least"),
            ("{% role 'editor' %}x{% endrole %}", "is_role"),
        ],
    )
    def test_block_compiles_to_guarded_if(self, env, source, query):
        tree = env.parse(source)
        if_node = tree.find(nodes.If)

        assert isinstance(if_node.test, nodes.Call)
        assert isinstance(if_node.test.node, nodes.ExtensionAttribute)
        assert if_node.test.node.name == "_check"
        assert if_node.test.args[0].value == query
        assert [n.data for n in if_node.body[0].nodes] == ["x"]
        assert if_node.else_ == []

    def test_expression_is_kept_as_parsed(self, env):
        tree = env.parse("{% can perms %}x{% endcan %}")
        argument = tree.find(nodes.If).test.args[1]

        assert isinstance(argument, nodes.Name)
        assert argument.name == "perms"

    def test_unclosed_block_fails_at_parse_time(self, env):
        with pytest.raises(TemplateSyntaxError):
            env.parse("{% can 'edit-post' %}x")

    def test_mismatched_close_tag_fails(self, env):
        with pytest.raises(TemplateSyntaxError):
            env.parse("{% can 'edit-post' %}x{% endrole %}")


@pytest.mark.unit
class TestRendering:
    """Test render-time evaluation."""

    def test_allowed_block_renders(self, env):
        assert env.from_string("{% can 'edit-post' %}A{% endcan %}").render() == "A"

    def test_denied_block_is_omitted(self, env):
        assert env.from_string("{% can 'delete-post' %}A{% endcan %}").render() == ""

    def test_role_block(self, env):
        template = env.from_string(
            "{% role 'editor' %}E{% endrole %}{% role 'admin' %}X{% endrole %}"
        )

        assert template.render() == "E"

    def test_list_literal_passed_verbatim(self, env, recording_service):
        env.from_string("{% canatleast ['edit-post', 'x'] %}B{% endcanatleast %}").render()

        assert recording_service.calls == [("can_at_least", ["edit-post", "x"])]

    def test_context_variable_passed_verbatim(self, env, recording_service):
        perms = ("edit-post", "view-post")

        output = env.from_string("{% can perms %}A{% endcan %}").render(perms=perms)

        assert output == ""
        assert recording_service.calls == [("can", perms)]

    def test_else_branch(self, env):
        template = env.from_string("{% can 'delete-post' %}yes{% else %}no{% endcan %}")

        assert template.render() == "no"

    def test_nested_blocks(self, env):
        template = env.from_string(
            "{% role 'editor' %}[{% can 'edit-post' %}e{% endcan %}"
            "{% can 'level:2' %}2{% endcan %}]{% endrole %}"
        )

        assert template.render() == "[e]"

    def test_evaluated_on_every_render(self, env, recording_service):
        template = env.from_string("{% can 'publish' %}P{% endcan %}")

        assert template.render() == ""
        recording_service.permissions.add("publish")
        assert template.render() == "P"

    def test_templates_from_loader(self, recording_service):
        environment = Environment(
            loader=DictLoader(
                {
                    "base.html": "<nav>{% block nav %}{% endblock %}</nav>",
                    "page.html": (
                        "{% extends 'base.html' %}{% block nav %}"
                        "{% can 'edit-post' %}edit{% endcan %}{% endblock %}"
                    ),
                }
            )
        )
        register_directives(environment, recording_service)

        assert environment.get_template("page.html").render() == "<nav>edit</nav>"

    def test_service_errors_propagate(self):
        class Failing(RecordingService):
            def can(self, permission):
                raise LookupError("store offline")

        environment = Environment()
        register_directives(environment, Failing())

        with pytest.raises(LookupError, match="store offline"):
            environment.from_string("{% can 'x' %}A{% endcan %}").render()


@pytest.mark.unit
class TestRegistration:
    """Test register_directives() and find_conflicts()."""

    def test_no_conflicts_on_fresh_environment(self):
        assert find_conflicts(Environment()) == []

    def test_conflicting_extension_raises(self, recording_service):
        environment = Environment(extensions=[RoleTagExtension])

        with pytest.raises(DirectiveConflictError) as exc_info:
            register_directives(environment, recording_service)

        assert exc_info.value.tokens == ["role"]
        assert SentinelExtension.identifier not in environment.extensions

    def test_conflict_error_is_value_error(self):
        assert issubclass(DirectiveConflictError, ValueError)

    def test_registering_again_swaps_service(self, env):
        other = RecordingService(permissions={"delete-post"})

        register_directives(env, other)

        assert env.from_string("{% can 'delete-post' %}D{% endcan %}").render() == "D"

    def test_logs_registration(self, recording_service, mock_logger):
        register_directives(Environment(), recording_service, logger=mock_logger)

        mock_logger.info.assert_called_once_with(
            "directives_registered", tokens=directive_tokens()
        )

    def test_extension_without_service_fails_on_render(self):
        environment = Environment(extensions=[SentinelExtension])
        template = environment.from_string("{% can 'x' %}A{% endcan %}")

        with pytest.raises(RuntimeError, match="register_directives"):
            template.render()
