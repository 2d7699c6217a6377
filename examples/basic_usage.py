#!/usr/bin/env python3
"""
Basic usage examples for graphql_helper.

Declares fragments, a union, a partial, queries and a mutation against the
default engine, prints the documents they produce, and runs them when
GRAPHQL_HELPER_HOST points at a server. The module can also be fed to the CLI:

    cd examples && graphql-helper dump basic_usage
"""

import asyncio
import os

import graphql_helper as gql

# Fragments

SitePath = gql.fragment("PathOfSite", "Path")("""{
  id
  name
  slug
}""")

Site = gql.fragment("Site")("""{
  id
  name
  paths {
    """, SitePath, """
  }
}""")

# Union

ClipArticle = gql.fragment("ClipArticle")("{ id article { title } }")
ClipPost = gql.fragment("ClipPost")("{ id post { title } }")
Clip = gql.union(ClipArticle, ClipPost)

# Partial

site_by_key = gql.partial("""
  site(key: $key) {
    """, Site, """
  }
""")

# Operations

my_query = gql.query("MyQuery", {"key": "String!"})("""{
  env
  site(key: $key) {
    id
    name
  }
}""")

query_with_fragment = gql.query("MyComplexQuery")("""{
  site(key: "bustle") {
    """, Site, """
  }
  path(id: """, 2271, """) {
    """, SitePath, """
  }
}""")

query_with_union = gql.query("MyUnionQuery")("""{
  clips(ids: [ 630, 656, 659 ]) {
    """, Clip, """
  }
}""")

query_with_partial = gql.query("MyOtherQuery", {"key": "String!"})("""{
  env
  """, site_by_key, """
}""")

create_image_card = gql.mutation("createImageCard", {"key": "String!", "lint": "Boolean"})("""{
  image {
    id
    key
    url
  }
}""")


def print_documents() -> None:
    """Print every document declared above."""
    for operation in (my_query, query_with_fragment, query_with_union, query_with_partial, create_image_card):
        print(f"=== {operation.name} ===")
        print(operation)
        print()


async def run_operations(host: str) -> None:
    """Run the queries against ``host``."""
    gql.configure(host=host)
    async with gql.default_engine:
        print(await my_query({"key": "bustle"}))
        print(await query_with_fragment())
        results = await gql.batch([my_query, query_with_partial], {"key": "bustle"})
        print(results)
        try:
            await create_image_card({"key": "2016/4/1/518314746.jpg"})
        except gql.GraphQLOperationError as e:
            print(f"Mutation rejected: {e.errors}")


if __name__ == "__main__":
    print_documents()
    host = os.getenv("GRAPHQL_HELPER_HOST")
    if host:
        asyncio.run(run_operations(host))
