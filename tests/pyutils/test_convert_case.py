from graphql_webhooks.pyutils import camel_case, param_case, split_words


def describe_split_words():
    def splits_at_case_changes_and_separators():
        assert split_words("messageAdded_subscription") == [
            "message",
            "Added",
            "subscription",
        ]
        assert split_words("kebab-case name") == ["kebab", "case", "name"]

    def keeps_acronyms_together():
        assert split_words("SlowXMLParser") == ["Slow", "XML", "Parser"]
        assert split_words("userID") == ["user", "ID"]

    def separates_numbers():
        assert split_words("Python3Script") == ["Python", "3", "Script"]

    def returns_nothing_for_empty_names():
        assert split_words("") == []
        assert split_words("__") == []


def describe_camel_case():
    def converts_snake_case():
        assert camel_case("message_added") == "messageAdded"
        assert camel_case("message_added_subscription") == (
            "messageAddedSubscription"
        )

    def converts_mixed_names():
        assert camel_case("messageAdded_subscription") == "messageAddedSubscription"
        assert camel_case("search_Author_books_first") == "searchAuthorBooksFirst"
        assert camel_case("kebab-case-name") == "kebabCaseName"

    def may_start_with_uppercase():
        assert camel_case("CamelCase") == "camelCase"

    def works_with_acronyms():
        assert camel_case("SlowXMLParser") == "slowXmlParser"
        assert camel_case("user_ID") == "userId"

    def works_with_numbers():
        assert camel_case("python3_script") == "python3Script"

    def keeps_already_camel():
        assert camel_case("camelCase") == "camelCase"


def describe_param_case():
    def converts_typical_names():
        assert param_case("BlogPost") == "blog-post"
        assert param_case("blogPosts") == "blog-posts"
        assert param_case("snake_case") == "snake-case"

    def works_with_acronyms():
        assert param_case("SlowXMLParser") == "slow-xml-parser"

    def keeps_already_param_case():
        assert param_case("param-case") == "param-case"
