import json
import logging

import graphwalk as g
from graphwalk import graphql


schema_document = graphql.parse_schema("""
    type Product {
        id: ID!
        name: String
        reviews: [Review!]!
    }

    type Review {
        id: ID!
        grade: Int!
        title: String
        description: String
        product: Product
    }

    input ProductInput {
        name: String!
    }

    input ReviewInput {
        product: ID!
        grade: Int!
        title: String
        description: String
    }

    type Query {
        products: [Product!]!
        product(id: ID!): Product
        reviews: [Review!]!
    }

    type Mutation {
        createProduct(product: ProductInput!): Product!
        createReview(review: ReviewInput!): Review!
    }
""")


def create_store():
    return g.Store([
        g.Collection("products", [
            {"id": 1, "name": "Avengers - End game"},
        ]),
        g.Collection("reviews", [
            {"id": 1, "product": 1, "grade": 5, "title": "Great movie", "description": "Great actor"},
            {"id": 2, "product": 1, "grade": 3, "title": "Too long", "description": "Long and fine"},
        ]),
    ])


resolvers = g.ResolverTable()


@resolvers.field("Query", "products")
@g.dependencies(store=g.Store)
def resolve_products(root, args, *, store):
    return store.products.all()


@resolvers.field("Query", "product")
@g.dependencies(store=g.Store)
async def resolve_product(root, args, *, store):
    return store.products.get(int(args["id"]))


@resolvers.field("Query", "reviews")
@g.dependencies(store=g.Store)
def resolve_reviews(root, args, *, store):
    return store.reviews.all()


@resolvers.field("Mutation", "createProduct")
@g.dependencies(store=g.Store)
def resolve_create_product(root, args, *, store):
    return store.products.insert(args["product"])


@resolvers.field("Mutation", "createReview")
@g.dependencies(store=g.Store)
def resolve_create_review(root, args, *, store):
    return store.reviews.insert(args["review"])


@resolvers.field("Product", "reviews")
@g.dependencies(store=g.Store)
def resolve_product_reviews(product, args, *, store):
    return store.reviews.filter(lambda review: review["product"] == product["id"])


# Review.product holds the product identifier: it is dereferenced here.
@resolvers.reference("Product")
@g.dependencies(store=g.Store)
def resolve_product_reference(identifier, *, store):
    return store.products.get(identifier)


def main():
    logging.basicConfig(level=logging.DEBUG)

    engine = schema_document.create_engine(resolvers)
    executor = engine.create_executor({g.Store: create_store()})

    documents = [
        """
            mutation {
                createProduct(product: {name: "example"}) { id name }
            }
        """,
        """
            {
                products { id name reviews { grade title } }
                reviews { title product { name } }
            }
        """,
    ]

    for document in documents:
        result = graphql.execute(document, executor=executor)
        print(json.dumps(result.to_dict(), indent=4))


if __name__ == "__main__":
    main()
