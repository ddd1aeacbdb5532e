from __future__ import annotations

from typing import Optional, Sequence

from core.domain.entities.graphql_request_entity import GraphQLRequestEntity
from core.services.coordinate_service import Coordinate, CoordinateService

MANDI_FIELDS = (
    "for_date",
    "apmc_id",
    "dtname",
    "thname",
    "apmc_name",
    "crop_name",
    "variety_name",
    "low_price",
    "high_price",
    "price",
    "quantity",
    "distance",
    "distance_unit",
)

WAREHOUSE_FIELDS = (
    "warehouse_code",
    "warehouse_name",
    "phone",
    "email",
    "village",
    "taluka",
    "district",
    "warehouse_address",
    "region",
    "pincode",
    "distance",
    "distance_unit",
)


def _selection(fields: Sequence[str], indent: str = "          ") -> str:
    return "\n".join(f"{indent}{f}" for f in fields)


class HasuraQueryBuilder:
    """
    Builds the parameterized GraphQL documents sent to Hasura.

    Every filter value travels as a variable; nothing from the inbound request
    is interpolated into the document text.
    """

    MANDI_RESULT_KEY = "mandihouse"
    WAREHOUSE_RESULT_KEY = "warehouse"

    @classmethod
    def market_price(
        cls,
        *,
        for_date: str,
        crops: Sequence[str],
        latitude: Optional[Coordinate] = None,
        longitude: Optional[Coordinate] = None,
    ) -> GraphQLRequestEntity:
        """
        SearchMandi over `mandihouse`.

        Filters on for_date equality and crop_name membership. The latitude /
        longitude equality filters are only added when both coordinates are
        present.
        """
        with_coords = CoordinateService.is_present(latitude) and CoordinateService.is_present(longitude)

        params = ["$for_date: date!", "$crops: [String!]"]
        where = ["for_date: { _eq: $for_date }", "crop_name: { _in: $crops }"]
        variables = {"for_date": for_date, "crops": list(crops)}

        if with_coords:
            params += ["$latitude: String!", "$longitude: String!"]
            where += ["latitude: { _eq: $latitude }", "longitude: { _eq: $longitude }"]
            variables["latitude"] = CoordinateService.to_graphql_string(latitude)
            variables["longitude"] = CoordinateService.to_graphql_string(longitude)

        signature = ", ".join(params)
        filters = ", ".join(where)
        query = f"""
      query SearchMandi({signature}) {{
        {cls.MANDI_RESULT_KEY}(
          where: {{
            {filters}
          }}
        ) {{
{_selection(MANDI_FIELDS)}
        }}
      }}
    """
        return GraphQLRequestEntity(operation_name="SearchMandi", query=query, variables=variables)

    @classmethod
    def nearest_warehouses(cls, *, latitude: Coordinate, longitude: Coordinate) -> GraphQLRequestEntity:
        """
        GetWarehouses over `warehouse`, filtered by latitude/longitude equality.

        Distance is computed on the database side; no ordering or limit is
        applied here.
        """
        query = f"""
      query GetWarehouses($latitude: String!, $longitude: String!) {{
        {cls.WAREHOUSE_RESULT_KEY}(
          where: {{
            latitude: {{ _eq: $latitude }}, longitude: {{ _eq: $longitude }}
          }}
        ) {{
{_selection(WAREHOUSE_FIELDS)}
        }}
      }}
    """
        variables = {
            "latitude": CoordinateService.to_graphql_string(latitude),
            "longitude": CoordinateService.to_graphql_string(longitude),
        }
        return GraphQLRequestEntity(operation_name="GetWarehouses", query=query, variables=variables)
