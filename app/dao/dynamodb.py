"""
DynamoDB implementation of VPCRepository.

All DynamoDB-specific concerns live here — boto3 client setup, table
bootstrapping, pagination, update expressions — keeping the service layer
storage-agnostic.

Table schema
────────────
  Table name    : vpc_records  (configurable via DYNAMODB_TABLE_NAME)
  Partition key : id  (String)

The table is created automatically on first use when it does not already
exist.  In production, prefer managing the table via CloudFormation / SAM /
Terraform and removing the auto-create logic.
"""

import logging
from typing import Any, Optional

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from app.config import settings
from app.dao.base import VPCRepository
from app.exceptions import StoreError

logger = logging.getLogger(__name__)


class DynamoDBVPCRepository(VPCRepository):
    """
    VPCRepository backed by Amazon DynamoDB.

    The instance is lightweight — the boto3 resource and table handle are
    created lazily on first use so that importing this module does not
    immediately require live AWS credentials.
    """

    def __init__(
        self,
        table_name: Optional[str] = None,
        region_name: Optional[str] = None,
        endpoint_url: Optional[str] = None,
    ) -> None:
        self.table_name = table_name or settings.dynamodb_table_name
        self.region_name = region_name or settings.aws_region
        self.endpoint_url = endpoint_url or settings.dynamodb_endpoint_url
        self._table = None  # populated on first access via _get_table()

    # ── Internal helpers ──────────────────────────────────────────────────────

    def _build_resource(self):
        """Create a boto3 DynamoDB resource from application settings."""
        kwargs: dict = {"region_name": self.region_name}
        if settings.aws_access_key_id:
            kwargs["aws_access_key_id"] = settings.aws_access_key_id
            kwargs["aws_secret_access_key"] = settings.aws_secret_access_key
        if self.endpoint_url:
            # Enables local DynamoDB (e.g. `dynamodb-local` container)
            kwargs["endpoint_url"] = self.endpoint_url
        return boto3.resource("dynamodb", **kwargs)

    def _get_table(self):
        """
        Return the DynamoDB Table handle, creating the table if it does not
        yet exist.  The handle is cached after the first successful call.
        """
        if self._table is not None:
            return self._table

        ddb = self._build_resource()

        try:
            table = ddb.create_table(
                TableName=self.table_name,
                KeySchema=[{"AttributeName": "id", "KeyType": "HASH"}],
                AttributeDefinitions=[{"AttributeName": "id", "AttributeType": "S"}],
                BillingMode="PAY_PER_REQUEST",
            )
            table.wait_until_exists()
            logger.info("DynamoDB table '%s' created.", self.table_name)
        except ClientError as exc:
            if exc.response["Error"]["Code"] == "ResourceInUseException":
                # Table already exists — reuse it
                table = ddb.Table(self.table_name)
            else:
                raise

        self._table = table
        return self._table

    @staticmethod
    def _update_expression(changes: dict[str, Any]) -> tuple[str, dict, dict]:
        """
        Build an UpdateItem expression from *changes*.

        Every attribute goes through ExpressionAttributeNames because
        ``name`` and ``status`` are DynamoDB reserved words.
        """
        names: dict[str, str] = {"#id": "id"}
        values: dict[str, Any] = {}
        set_parts: list[str] = []
        remove_parts: list[str] = []

        for idx, (key, value) in enumerate(changes.items()):
            placeholder = f"#f{idx}"
            names[placeholder] = key
            if value is None:
                remove_parts.append(placeholder)
            else:
                values[f":v{idx}"] = value
                set_parts.append(f"{placeholder} = :v{idx}")

        clauses = []
        if set_parts:
            clauses.append("SET " + ", ".join(set_parts))
        if remove_parts:
            clauses.append("REMOVE " + ", ".join(remove_parts))
        return " ".join(clauses), names, values

    # ── VPCRepository interface ───────────────────────────────────────────────

    def insert(self, record: dict) -> None:
        """
        Write *record* to DynamoDB using a PutItem call.

        The generated id is never reused, so the condition only guards
        against a collision.
        """
        try:
            table = self._get_table()
            table.put_item(
                Item={k: v for k, v in record.items() if v is not None},
                ConditionExpression="attribute_not_exists(#id)",
                ExpressionAttributeNames={"#id": "id"},
            )
            logger.info("Saved VPC record '%s'.", record.get("id"))
        except (ClientError, BotoCoreError) as exc:
            logger.error("DynamoDB PutItem failed: %s", exc)
            raise StoreError(f"Failed to save VPC record: {exc}") from exc

    def get(self, vpc_id: str) -> Optional[dict]:
        """
        Fetch a single item from DynamoDB by primary key.

        Returns ``None`` when the item does not exist.
        """
        try:
            table = self._get_table()
            response = table.get_item(Key={"id": vpc_id})
            return response.get("Item")  # None if key not found
        except (ClientError, BotoCoreError) as exc:
            logger.error("DynamoDB GetItem failed for '%s': %s", vpc_id, exc)
            raise StoreError(f"Failed to read VPC record: {exc}") from exc

    def list_all(self) -> list[dict]:
        """
        Scan the entire table and return all items.

        Handles DynamoDB pagination transparently — multiple Scan calls are
        issued until ``LastEvaluatedKey`` is absent from the response.
        """
        try:
            table = self._get_table()
            response = table.scan()
            items: list[dict] = response.get("Items", [])

            while "LastEvaluatedKey" in response:
                response = table.scan(ExclusiveStartKey=response["LastEvaluatedKey"])
                items.extend(response.get("Items", []))

            logger.info("Listed %d VPC record(s) from DynamoDB.", len(items))
            return items
        except (ClientError, BotoCoreError) as exc:
            logger.error("DynamoDB Scan failed: %s", exc)
            raise StoreError(f"Failed to list VPC records: {exc}") from exc

    def update(self, vpc_id: str, changes: dict[str, Any]) -> Optional[dict]:
        """
        Apply *changes* with a conditional UpdateItem call.

        ``attribute_exists(id)`` makes the existence check and the write a
        single atomic operation; a failed condition means the item is absent.
        """
        if not changes:
            return self.get(vpc_id)

        expression, names, values = self._update_expression(changes)
        kwargs: dict = {
            "Key": {"id": vpc_id},
            "UpdateExpression": expression,
            "ConditionExpression": "attribute_exists(#id)",
            "ExpressionAttributeNames": names,
            "ReturnValues": "ALL_NEW",
        }
        if values:
            kwargs["ExpressionAttributeValues"] = values

        try:
            table = self._get_table()
            response = table.update_item(**kwargs)
        except ClientError as exc:
            if exc.response["Error"]["Code"] == "ConditionalCheckFailedException":
                logger.warning("Update called for non-existent VPC '%s'.", vpc_id)
                return None
            logger.error("DynamoDB UpdateItem failed for '%s': %s", vpc_id, exc)
            raise StoreError(f"Failed to update VPC record: {exc}") from exc
        except BotoCoreError as exc:
            logger.error("DynamoDB UpdateItem failed for '%s': %s", vpc_id, exc)
            raise StoreError(f"Failed to update VPC record: {exc}") from exc

        logger.info("Updated DynamoDB record for VPC '%s'.", vpc_id)
        return response.get("Attributes")

    def delete(self, vpc_id: str) -> bool:
        """
        Delete the item with *vpc_id* as primary key.

        ``ReturnValues="ALL_OLD"`` lets us detect whether the item actually
        existed before the delete, so we can return an accurate boolean.
        """
        try:
            table = self._get_table()
            response = table.delete_item(
                Key={"id": vpc_id},
                ReturnValues="ALL_OLD",
            )
        except (ClientError, BotoCoreError) as exc:
            logger.error("DynamoDB DeleteItem failed for '%s': %s", vpc_id, exc)
            raise StoreError(f"Failed to delete VPC record: {exc}") from exc

        existed = bool(response.get("Attributes"))
        if existed:
            logger.info("Deleted DynamoDB record for VPC '%s'.", vpc_id)
        else:
            logger.warning("Delete called for non-existent VPC '%s'.", vpc_id)
        return existed
