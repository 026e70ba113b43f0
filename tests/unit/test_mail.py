"""
Tests for the mail client and its sub-resources: paths, verbs and bodies.
"""

from datetime import datetime, timezone

import pytest

from stack0.mail import (
    ListEmailsRequest,
    SendEmailRequest,
    UpdateTemplateRequest,
)


class TestMailClient:
    @pytest.mark.asyncio
    async def test_send(self, client, transport):
        transport.queue(json_body={"id": "em_1", "status": "queued", "from": "hi@example.com"})

        sent = await client.mail.send(
            from_="hi@example.com", to="ada@example.com", subject="Hello", text="Hi"
        )

        assert sent.id == "em_1"
        assert sent.from_ == "hi@example.com"
        assert transport.last.method == "POST"
        assert transport.last.url.path == "/mail/send"
        assert transport.last_json() == {
            "from": "hi@example.com",
            "to": "ada@example.com",
            "subject": "Hello",
            "text": "Hi",
        }

    @pytest.mark.asyncio
    async def test_send_rejects_request_and_kwargs(self, client):
        request = SendEmailRequest(from_="a@example.com", to="b@example.com", subject="x")
        with pytest.raises(TypeError):
            await client.mail.send(request, subject="y")

    @pytest.mark.asyncio
    async def test_send_batch_passes_results_through(self, client, transport):
        transport.queue(
            json_body={
                "success": True,
                "data": [
                    {"id": "em_1", "success": True},
                    {"id": "", "success": False, "error": "Invalid recipient"},
                ],
            }
        )

        response = await client.mail.send_batch(
            emails=[
                {"from": "a@example.com", "to": "b@example.com", "subject": "1"},
                {"from": "a@example.com", "to": "bad", "subject": "2"},
            ]
        )

        assert [item.success for item in response.data] == [True, False]
        assert response.data[1].error == "Invalid recipient"
        assert transport.last.url.path == "/mail/send/batch"
        assert transport.last_json()["emails"][1]["to"] == "bad"

    @pytest.mark.asyncio
    async def test_send_broadcast(self, client, transport):
        transport.queue(json_body={"success": True, "data": [], "count": 2, "limitedByQuota": False})

        response = await client.mail.send_broadcast(
            from_="a@example.com", to=["b@example.com", "c@example.com"], subject="News"
        )

        assert response.count == 2
        assert response.limited_by_quota is False
        assert transport.last.url.path == "/mail/send/broadcast"
        assert transport.last_json()["to"] == ["b@example.com", "c@example.com"]

    @pytest.mark.asyncio
    async def test_list_query(self, client, transport):
        transport.queue(json_body={"emails": [{"id": "em_1", "from": "a@example.com"}], "total": 1})

        response = await client.mail.list(
            ListEmailsRequest(
                limit=10,
                status="delivered",
                from_="a@example.com",
                start_date=datetime(2024, 1, 1, tzinfo=timezone.utc),
            )
        )

        assert response.emails[0].from_ == "a@example.com"
        params = transport.last.url.params
        assert params["from"] == "a@example.com"
        assert params["limit"] == "10"
        assert params["status"] == "delivered"
        assert params["startDate"] == "2024-01-01T00:00:00Z"
        assert "offset" not in params

    @pytest.mark.asyncio
    async def test_list_without_filters(self, client, transport):
        await client.mail.list()
        assert str(transport.last.url) == "https://api.test/mail"

    @pytest.mark.asyncio
    async def test_actions_post_empty_body(self, client, transport):
        await client.mail.resend("em_1")
        assert transport.last.url.path == "/mail/em_1/resend"
        await client.mail.cancel("em_1")
        assert transport.last.url.path == "/mail/em_1/cancel"
        assert transport.last_json() == {}

    @pytest.mark.asyncio
    async def test_time_series_days(self, client, transport):
        await client.mail.get_time_series_analytics(days=7)
        assert transport.last.url.path == "/mail/analytics/timeseries"
        assert transport.last.url.params["days"] == "7"

        await client.mail.get_time_series_analytics()
        assert transport.last.url.query == b""

    @pytest.mark.asyncio
    async def test_list_senders(self, client, transport):
        transport.queue(json_body={"senders": [{"from": "a@example.com", "total": 3}]})

        response = await client.mail.list_senders(search="example")

        assert response.senders[0].from_ == "a@example.com"
        assert transport.last.url.params["search"] == "example"


class TestDomains:
    @pytest.mark.asyncio
    async def test_list_returns_array(self, client, transport):
        transport.queue(json_body=[{"id": "dom_1", "domain": "example.com", "status": "verified"}])

        domains = await client.mail.domains.list(project_slug="my-app")

        assert domains[0].domain == "example.com"
        assert transport.last.url.params["projectSlug"] == "my-app"

    @pytest.mark.asyncio
    async def test_add_and_verify(self, client, transport):
        await client.mail.domains.add("example.com")
        assert transport.last_json() == {"domain": "example.com"}

        transport.queue(json_body={"verified": True, "message": "ok"})
        result = await client.mail.domains.verify("dom_1")
        assert result.verified is True
        assert transport.last.url.path == "/mail/domains/dom_1/verify"

    @pytest.mark.asyncio
    async def test_delete_and_default(self, client, transport):
        await client.mail.domains.delete("dom_1")
        assert transport.last.method == "DELETE"
        assert transport.last.content == b""

        transport.queue(json_body={"id": "dom_1", "isDefault": True})
        domain = await client.mail.domains.set_default("dom_1")
        assert domain.is_default is True
        assert transport.last.url.path == "/mail/domains/dom_1/default"


class TestTemplates:
    @pytest.mark.asyncio
    async def test_update_puts_only_set_fields(self, client, transport):
        transport.queue(json_body={"id": "tpl_1", "subject": "New"})

        await client.mail.templates.update(UpdateTemplateRequest(id="tpl_1", subject="New"))

        assert transport.last.method == "PUT"
        assert transport.last.url.path == "/mail/templates/tpl_1"
        assert transport.last_json() == {"subject": "New"}

    @pytest.mark.asyncio
    async def test_get_by_slug_and_preview(self, client, transport):
        transport.queue(json_body={"id": "tpl_1", "slug": "welcome"})
        await client.mail.templates.get_by_slug("welcome")
        assert transport.last.url.path == "/mail/templates/slug/welcome"

        await client.mail.templates.preview("tpl_1", {"name": "Ada"})
        assert transport.last.url.path == "/mail/templates/tpl_1/preview"
        assert transport.last_json() == {"variables": {"name": "Ada"}}

    @pytest.mark.asyncio
    async def test_list_boolean_filter(self, client, transport):
        await client.mail.templates.list(is_active=False, limit=5)
        assert transport.last.url.params["isActive"] == "false"


class TestAudiencesAndContacts:
    @pytest.mark.asyncio
    async def test_remove_contacts_is_delete_with_body(self, client, transport):
        transport.queue(json_body={"success": True, "removed": 2})

        response = await client.mail.audiences.remove_contacts("aud_1", ["c_1", "c_2"])

        assert response.removed == 2
        assert transport.last.method == "DELETE"
        assert transport.last.url.path == "/mail/audiences/aud_1/contacts"
        assert transport.last_json() == {"contactIds": ["c_1", "c_2"]}

    @pytest.mark.asyncio
    async def test_add_contacts(self, client, transport):
        transport.queue(json_body={"success": True, "added": 1})

        response = await client.mail.audiences.add_contacts("aud_1", ["c_1"])

        assert response.added == 1
        assert transport.last.method == "POST"

    @pytest.mark.asyncio
    async def test_list_audience_contacts(self, client, transport):
        await client.mail.audiences.list_contacts(id="aud_1", status="subscribed")

        assert transport.last.url.path == "/mail/audiences/aud_1/contacts"
        assert dict(transport.last.url.params) == {"status": "subscribed"}

    @pytest.mark.asyncio
    async def test_import_contacts(self, client, transport):
        transport.queue(
            json_body={
                "success": True,
                "imported": 1,
                "skipped": 1,
                "errors": [{"email": "bad", "error": "Invalid email"}],
            }
        )

        response = await client.mail.contacts.import_contacts(
            audience_id="aud_1",
            contacts=[{"email": "ada@example.com", "first_name": "Ada"}, {"email": "bad"}],
        )

        assert response.errors[0].error == "Invalid email"
        assert transport.last.url.path == "/mail/contacts/import"
        assert transport.last_json() == {
            "audienceId": "aud_1",
            "contacts": [{"email": "ada@example.com", "firstName": "Ada"}, {"email": "bad"}],
        }

    @pytest.mark.asyncio
    async def test_update_contact(self, client, transport):
        transport.queue(json_body={"id": "c_1", "status": "unsubscribed"})

        await client.mail.contacts.update(id="c_1", status="unsubscribed")

        assert transport.last.url.path == "/mail/contacts/c_1"
        assert transport.last_json() == {"status": "unsubscribed"}


class TestCampaigns:
    @pytest.mark.asyncio
    async def test_send_now(self, client, transport):
        transport.queue(json_body={"success": True, "sentCount": 10, "totalRecipients": 10})

        response = await client.mail.campaigns.send(id="cmp_1", send_now=True)

        assert response.sent_count == 10
        assert transport.last.url.path == "/mail/campaigns/cmp_1/send"
        assert transport.last_json() == {"sendNow": True}

    @pytest.mark.asyncio
    async def test_actions(self, client, transport):
        for action in ("pause", "cancel"):
            await getattr(client.mail.campaigns, action)("cmp_1")
            assert transport.last.url.path == f"/mail/campaigns/cmp_1/{action}"

        transport.queue(json_body={"id": "cmp_2"})
        copy = await client.mail.campaigns.duplicate("cmp_1")
        assert copy.id == "cmp_2"

        transport.queue(json_body={"total": 10, "openRate": 0.5})
        stats = await client.mail.campaigns.get_stats("cmp_1")
        assert stats.open_rate == 0.5


class TestSequences:
    @pytest.mark.asyncio
    async def test_get_with_nodes(self, client, transport):
        transport.queue(
            json_body={
                "id": "seq_1",
                "status": "draft",
                "triggerType": "manual",
                "nodes": [{"id": "n_1", "nodeType": "trigger"}],
                "connections": [
                    {"id": "cn_1", "sourceNodeId": "n_1", "targetNodeId": "n_2"}
                ],
            }
        )

        sequence = await client.mail.sequences.get("seq_1")

        assert sequence.nodes[0].node_type.value == "trigger"
        assert sequence.connections[0].target_node_id == "n_2"

    @pytest.mark.asyncio
    async def test_lifecycle_actions(self, client, transport):
        for action in ("publish", "pause", "resume", "archive"):
            await getattr(client.mail.sequences, action)("seq_1")
            assert transport.last.url.path == f"/mail/sequences/seq_1/{action}"
            assert transport.last.method == "POST"

    @pytest.mark.asyncio
    async def test_duplicate_name_is_optional(self, client, transport):
        transport.queue_many({"id": "seq_2"}, {"id": "seq_3"})

        await client.mail.sequences.duplicate("seq_1")
        assert transport.last_json() == {}

        await client.mail.sequences.duplicate("seq_1", name="Copy")
        assert transport.last_json() == {"name": "Copy"}

    @pytest.mark.asyncio
    async def test_node_endpoints(self, client, transport):
        transport.queue_many({"id": "n_1"}, {"id": "n_1"}, {"id": "n_1"})

        await client.mail.sequences.create_node(
            sequence_id="seq_1", node_type="email", name="Welcome", position_x=0, position_y=100
        )
        assert transport.last.url.path == "/mail/sequences/seq_1/nodes"
        assert transport.last_json() == {
            "nodeType": "email",
            "name": "Welcome",
            "positionX": 0,
            "positionY": 100,
        }

        await client.mail.sequences.update_node_position(
            sequence_id="seq_1", node_id="n_1", position_x=10, position_y=20
        )
        assert transport.last.url.path == "/mail/sequences/seq_1/nodes/n_1/position"
        assert transport.last_json() == {"positionX": 10, "positionY": 20}

        await client.mail.sequences.set_node_timer(
            sequence_id="seq_1", node_id="n_1", delay_amount=2, delay_unit="days"
        )
        assert transport.last.method == "PUT"
        assert transport.last.url.path == "/mail/sequences/seq_1/nodes/n_1/timer"
        assert transport.last_json() == {"delayAmount": 2, "delayUnit": "days"}

    @pytest.mark.asyncio
    async def test_connections_and_entries(self, client, transport):
        transport.queue(json_body={"id": "cn_1"})
        await client.mail.sequences.create_connection(
            sequence_id="seq_1", source_node_id="n_1", target_node_id="n_2"
        )
        assert transport.last_json() == {"sourceNodeId": "n_1", "targetNodeId": "n_2"}

        await client.mail.sequences.delete_connection("seq_1", "cn_1")
        assert transport.last.method == "DELETE"
        assert transport.last.url.path == "/mail/sequences/seq_1/connections/cn_1"

        await client.mail.sequences.list_entries(sequence_id="seq_1", limit=5)
        assert transport.last.url.path == "/mail/sequences/seq_1/entries"

        await client.mail.sequences.remove_contact(
            sequence_id="seq_1", entry_id="ent_1", reason="unsubscribed"
        )
        assert transport.last.url.path == "/mail/sequences/seq_1/remove-contact"
        assert transport.last_json() == {"entryId": "ent_1", "reason": "unsubscribed"}

    @pytest.mark.asyncio
    async def test_add_contact(self, client, transport):
        transport.queue(json_body={"id": "ent_1", "contactId": "c_1", "status": "active"})

        entry = await client.mail.sequences.add_contact("seq_1", "c_1")

        assert entry.contact_id == "c_1"
        assert transport.last_json() == {"contactId": "c_1"}


class TestEvents:
    @pytest.mark.asyncio
    async def test_track(self, client, transport):
        transport.queue(json_body={"success": True, "eventOccurrenceId": "occ_1"})

        response = await client.mail.events.track(
            event_name="order_placed", contact_email="ada@example.com", properties={"total": 42}
        )

        assert response.event_occurrence_id == "occ_1"
        assert transport.last.url.path == "/mail/events/track"
        assert transport.last_json() == {
            "eventName": "order_placed",
            "contactEmail": "ada@example.com",
            "properties": {"total": 42},
        }

    @pytest.mark.asyncio
    async def test_track_batch(self, client, transport):
        transport.queue(json_body={"success": True, "results": [{"success": True}], "totalProcessed": 1})

        response = await client.mail.events.track_batch(
            events=[{"event_name": "signup", "contact_id": "c_1"}]
        )

        assert response.total_processed == 1
        assert transport.last_json() == {"events": [{"eventName": "signup", "contactId": "c_1"}]}

    @pytest.mark.asyncio
    async def test_occurrences_and_analytics(self, client, transport):
        await client.mail.events.list_occurrences(event_id="evt_1", limit=20)
        assert transport.last.url.path == "/mail/events/occurrences"
        assert transport.last.url.params["eventId"] == "evt_1"

        transport.queue(json_body={"totalReceived": 5, "dailyCounts": [{"date": "2024-01-01", "count": 5}]})
        analytics = await client.mail.events.get_analytics("evt_1")
        assert analytics.daily_counts[0].count == 5
        assert transport.last.url.path == "/mail/events/analytics/evt_1"
