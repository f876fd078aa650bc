from graphql import (
    GraphQLField,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLString,
    build_schema,
)

from graphql_webhooks.utilities import extract_models

from ..chat_schema import chat_sdl


def describe_extract_models():
    def finds_types_with_list_and_single_fields():
        assert extract_models(build_schema(chat_sdl)) == ["User"]

    def requires_a_list_field():
        schema = build_schema(
            """
            type Query { comment(id: ID!): Comment }
            type Comment { id: ID!, text: String }
            """
        )

        assert extract_models(schema) == []

    def requires_a_single_field():
        schema = build_schema(
            """
            type Query { comments: [Comment] }
            type Comment { id: ID!, text: String }
            """
        )

        assert extract_models(schema) == []

    def requires_an_id_field():
        schema = build_schema(
            """
            type Query { tag(id: ID!): Tag, tags: [Tag] }
            type Tag { name: String }
            """
        )

        assert extract_models(schema) == []

    def rejects_list_fields_with_required_arguments():
        schema = build_schema(
            """
            type Query { post(id: ID!): Post, posts(authorId: ID!): [Post] }
            type Post { id: ID! }
            """
        )

        assert extract_models(schema) == []

    def accepts_list_fields_with_optional_arguments():
        schema = build_schema(
            """
            type Query { post(id: ID!): Post, posts(first: Int): [Post!]! }
            type Post { id: ID! }
            """
        )

        assert extract_models(schema) == ["Post"]

    def requires_id_as_only_argument_of_the_single_field():
        schema = build_schema(
            """
            type Query { post(id: ID!, draft: Boolean): Post, posts: [Post] }
            type Post { id: ID! }
            """
        )

        assert extract_models(schema) == []

    def compares_names_independent_of_case_convention():
        schema = build_schema(
            """
            type Query {
              blog_post(id: ID!): BlogPost
              blogPosts: [BlogPost]
              user(id: ID!): User
              users: [User]
            }
            type BlogPost { id: ID!, title: String }
            type User { id: ID! }
            """
        )

        assert extract_models(schema) == ["BlogPost", "User"]

    def requires_matching_field_names():
        schema = build_schema(
            """
            type Query { me: User, everybody: [User] }
            type User { id: ID! }
            """
        )

        assert extract_models(schema) == []

    def returns_nothing_without_query_type():
        subscription_type = GraphQLObjectType(
            "Subscription", {"ping": GraphQLField(GraphQLString)}
        )

        schema = GraphQLSchema(subscription=subscription_type)

        assert extract_models(schema) == []
